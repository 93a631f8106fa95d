from __future__ import annotations

import logging

import pytest

from gtkterm.cli import build_arg_parser, configure_logging, main
from gtkterm.core.config import SectionStore, hard_default_configuration


def test_build_arg_parser_defaults():
    args = build_arg_parser().parse_args([])

    assert args.config == "default"
    assert args.show_config is False
    assert args.list_sections is False
    assert args.remove_section is None


def test_first_run_creates_config_file(config_file):
    assert main([]) == 0
    assert config_file.exists()
    assert SectionStore(config_file).sections() == ["default"]


def test_show_config_prints_default_section(config_file, capsys):
    assert main(["--show-config"]) == 0

    out = capsys.readouterr().out
    assert out.startswith("Configuration loaded from file: [default]\n")
    assert "Speed                    : 9600" in out


def test_show_config_for_named_section(config_file, capsys):
    cfg = hard_default_configuration()
    cfg.port.baudrate = 115200
    SectionStore(config_file).save("modem", cfg)

    assert main(["-c", "modem", "-S"]) == 0

    out = capsys.readouterr().out
    assert "[modem]" in out
    assert "Speed                    : 115200" in out


def test_missing_section_exits_with_error(config_file, caplog):
    with caplog.at_level(logging.ERROR):
        assert main(["--config", "nope", "--show-config"]) == 1
    assert 'No section "nope"' in caplog.text


def test_list_and_remove_sections(config_file, capsys):
    store = SectionStore(config_file)
    store.save("default", hard_default_configuration())
    store.save("old", hard_default_configuration())

    assert main(["--list-sections"]) == 0
    assert capsys.readouterr().out.split() == ["default", "old"]

    assert main(["--remove-section", "old"]) == 0
    assert store.sections() == ["default"]

    assert main(["--remove-section", "old"]) == 1


def test_save_as_copies_loaded_section(config_file):
    assert main(["--save-as", "copy"]) == 0
    store = SectionStore(config_file)
    assert store.sections() == ["default", "copy"]
    assert store.load("copy").configuration == store.load("default").configuration


def test_legacy_file_is_migrated_on_startup(isolated_config_env, config_file):
    legacy = isolated_config_env / ".gtktermrc"
    legacy.write_text("[default]\nbaudrate=4800\n", encoding="utf-8")

    assert main([]) == 0

    assert not legacy.exists()
    assert SectionStore(config_file).load("default").configuration.port.baudrate == 4800
    assert (config_file.parent / ".gtktermrc.v1").exists()


def test_configure_logging_keeps_existing_handlers():
    root = logging.getLogger()
    before = list(root.handlers)
    # pytest installs its own capture handlers, so this must be a no-op.
    assert before
    configure_logging(debug=True)
    assert root.handlers == before


@pytest.mark.parametrize("flag", ["--remove-section", "--save-as", "-c"])
def test_options_require_a_value(flag):
    with pytest.raises(SystemExit):
        build_arg_parser().parse_args([flag])
