from carsim.colorize import rize


def test_documented_example():
    assert rize("I am a banana!", "Yellow", "Green") == "\033[0;42;33mI am a banana!\033[0m"


def test_defaults():
    assert rize("x") == "\033[0;49;39mx\033[0m"


def test_unknown_names_fall_back_to_defaults():
    assert rize("hi", "Orange", "Purple", "Sparkly", "Nothing") == rize("hi")


def test_bold_formatting_and_reset():
    out = rize("t", "Red", "Default", "Bold", "Bold")
    assert out.startswith("\033[1;49;31m")
    assert out.endswith("\033[21m")
    assert "t" in out


def test_background_keeps_original_spelling():
    assert rize("m", background_color="Megenta") == "\033[0;45;39mm\033[0m"
    assert rize("m", background_color="Magenta") == rize("m")