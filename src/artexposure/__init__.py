"""art-exposure - random artworks from the Met collection as desktop wallpapers."""
