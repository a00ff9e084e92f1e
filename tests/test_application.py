import pytest

from eternakit.application import Application
from eternakit.cl_option import CommandLineOptionError
from eternakit.option import Options, OptionType


class _DemoApp(Application):
    def __init__(self):
        super().__init__()
        self.result = None

    def setup_options(self):
        self.add_option("seq", "", OptionType.STRING, False)
        self.add_option("ss", "", OptionType.STRING, True)
        self.add_option("steps", 1000, OptionType.INT)
        self.add_option("out_file", "eternabot.csv", OptionType.STRING)
        self.add_option("not_unique", False, OptionType.BOOL)
        self.add_option("temp", 4.0, OptionType.FLOAT)

    def run(self):
        self.result = (self.get_string_option("ss"), self.get_int_option("steps"))


def test_abstract_base_cannot_be_built():
    with pytest.raises(TypeError):
        Application()


def test_parse_and_run():
    app = _DemoApp()
    app.setup_options()
    Application.parse_command_line(app, ["-ss", "((..))", "-steps", "20", "-not_unique"])
    app.run()
    assert app.result == ("((..))", 20)
    assert Application.get_bool_option(app, "not_unique") is True
    assert Application.get_string_option(app, "out_file") == "eternabot.csv"


def test_float_option_default():
    app = _DemoApp()
    app.setup_options()
    Application.parse_command_line(app, ["-ss", "()"])
    assert Application.get_float_option(app, "temp") == 4.0


def test_required_missing():
    app = _DemoApp()
    app.setup_options()
    with pytest.raises(CommandLineOptionError, match="ss is a required option"):
        Application.parse_command_line(app, ["-steps", "5"])


def test_duplicate_option():
    app = _DemoApp()
    app.setup_options()
    with pytest.raises(CommandLineOptionError, match="already exists"):
        Application.add_option(app, "steps", 1, OptionType.INT, False)
    assert Application.get_int_option(app, "steps") == 1000


def test_add_cl_options_with_prefix():
    app = _DemoApp()
    extra = Options()
    extra.add_option("designs", 1, OptionType.INT)
    extra.add_option("mode", "fast", OptionType.STRING)
    app.add_cl_options(extra, "designer")
    names = [o.name for o in app.cl_options]
    assert names == ["designer.designs", "designer.mode"]
    assert app.cl_options.get_string("designer.mode") == "fast"
    assert app.cl_options.get_int("designer.designs") == 1


def test_add_cl_options_without_prefix():
    app = _DemoApp()
    extra = Options()
    extra.add_option("designs", 1, OptionType.INT)
    app.add_cl_options(extra)
    app.cl_options.parse_command_line(["-designs", "3"])
    assert app.cl_options.get_int("designs") == 3
    assert extra.get_int("designs") == 1


def test_unknown_option_name():
    app = _DemoApp()
    app.setup_options()
    with pytest.raises(CommandLineOptionError, match="unknown command line argument"):
        Application.parse_command_line(app, ["-ss", "()", "-nope"])