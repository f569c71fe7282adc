from __future__ import annotations

from ovaldef.cli import config


def test_minimal_config(helpers):
    cfg_path = helpers.local_dir("test-fixtures/minimal.yaml")
    cfg = config.load(path=cfg_path)
    assert cfg == config.Application(log=config.Log(slim=False, level="TRACE"))


def test_full_config(helpers):
    cfg_path = helpers.local_dir("test-fixtures/full.yaml")
    cfg = config.load(path=cfg_path)

    assert cfg == config.Application(
        log=config.Log(
            slim=True,
            level="DEBUG",
            show_level=False,
            show_timestamp=True,
        ),
        report=config.Report(
            output=config.OutputFormat.JSON,
            show_index=False,
            strict=True,
            fail_fast=True,
        ),
    )


def test_missing_config(tmpdir):
    cfg = config.load(path=str(tmpdir.join("missing.yaml")))
    assert cfg == config.Application()


def test_empty_config(tmpdir):
    cfg_path = tmpdir.join("empty.yaml")
    cfg_path.write("")

    cfg = config.load(path=str(cfg_path))
    assert cfg == config.Application()


def test_partial_section_keeps_defaults(tmpdir):
    cfg_path = tmpdir.join("partial.yaml")
    cfg_path.write("report:\n  strict: true\n")

    cfg = config.load(path=str(cfg_path))
    assert cfg.report == config.Report(strict=True)
    assert cfg.report.output == config.OutputFormat.TEXT
    assert cfg.log == config.Log()


def test_output_format_from_string():
    assert config.Report(output="json").output == config.OutputFormat.JSON
