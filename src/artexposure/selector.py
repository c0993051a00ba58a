"""
Random Selector

Resolve a set of candidate object ids into a single artwork that actually has an image.

The Met collection indexes many objects without a usable primary image, so a search result
is sampled uniformly at random *with replacement* and each pick is checked with a lookup
until one comes back with an image url or the attempt budget runs out. Picks are not
deduplicated; the same id may be looked up twice in one resolution.

Randomness is injected through a RandomSource so that tests (and the --seed option) get
deterministic picks.
"""

import random
from typing import Callable, Optional, Protocol, Sequence

from artexposure.errors import FatalError
from artexposure.errors import RetryableError
from artexposure.models import ArtworkRecord
from artexposure.cli_utils.console import log
from artexposure.cli_utils.console import warn


class ResolutionExhausted(FatalError):
    """
    Raised when no usable artwork was found within the attempt budget.
    """

    def __init__(self, attempts: int, candidates: int):
        self.attempts = attempts
        self.candidates = candidates
        super().__init__(
            f"Could not find an image with a url after {attempts} attempt(s) "
            f"across {candidates} candidate(s)."
        )


class RandomSource(Protocol):
    def next_index(self, bound: int) -> int:
        """Return an integer in [0, bound)."""
        ...


class SystemRandomSource:
    """RandomSource backed by a private random.Random instance."""

    def __init__(self, seed: Optional[int] = None):
        self._random = random.Random(seed)

    def next_index(self, bound: int) -> int:
        return self._random.randrange(bound)


def resolve(
    candidates: Sequence[int],
    lookup: Callable[[int], ArtworkRecord],
    max_tries: int,
    rng: RandomSource = None,
) -> ArtworkRecord:
    """
    Pick random candidates and look each one up until a record with an image url is found.

    Every attempt counts against max_tries, including lookups that raise a RetryableError
    and records without an image url. The first usable record is returned immediately.
    Raises ResolutionExhausted when the budget is spent, or straight away for an empty
    candidate set or a budget of zero.
    """

    if rng is None:
        rng = SystemRandomSource()

    if not candidates or max_tries <= 0:
        raise ResolutionExhausted(attempts=0, candidates=len(candidates))

    for attempt in range(1, max_tries + 1):
        object_id = candidates[rng.next_index(len(candidates))]
        log("attempt %d/%d: looking up object %s", attempt, max_tries, object_id)

        try:
            record = lookup(object_id)

        except RetryableError as error:
            warn(f"Error getting object info: {error}")
            continue

        if record.is_usable:
            return record

        log("object %s has no primary image", object_id)

    raise ResolutionExhausted(attempts=max_tries, candidates=len(candidates))
