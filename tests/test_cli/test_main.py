import sys
from subprocess import run


def test_launch_as_command_success():

    result = run(["art-exposure", "--help"], capture_output=True, text=True)
    assert result.returncode == 0
    assert "random" in result.stdout


def test_launch_as_module_success():

    result = run([sys.executable, "-m", "artexposure", "--help"], capture_output=True, text=True)
    assert result.returncode == 0
    assert "desktop" in result.stdout
