"""Unit tests for the argument parser module in file-mapper CLI."""

import argparse
from pathlib import Path

import pytest

from file_mapper.cli.argparser import collect_ignore_patterns, create_parser, parse_level, validate_args
from file_mapper.config import FileMapperConfig


@pytest.fixture
def parser():
    return create_parser()


def test_defaults(parser):
    args = parser.parse_args([])
    assert args.directory == Path(".")
    assert args.size is False
    assert args.ignore == []
    assert args.sort_by == "name"
    assert args.sort_direction == "asc"
    assert args.level is None
    assert args.follow_symlinks is False
    assert args.quiet is False
    assert args.no_color is False
    assert args.config is None
    assert args.no_config is False
    assert args.output is None


def test_all_options(parser):
    args = parser.parse_args(
        [
            "-s",
            "-i",
            "node_modules",
            "--ignore",
            "dist",
            "--sort-by",
            "size",
            "--sort-direction",
            "desc",
            "-l",
            "3",
            "-L",
            "-q",
            "--no-color",
            "--config",
            "cfg.json",
            "-o",
            "out.txt",
            "project",
        ]
    )
    assert args.directory == Path("project")
    assert args.size is True
    assert args.ignore == ["node_modules", "dist"]
    assert args.sort_by == "size"
    assert args.sort_direction == "desc"
    assert args.level == "3"
    assert args.follow_symlinks is True
    assert args.quiet is True
    assert args.no_color is True
    assert args.config == Path("cfg.json")
    assert args.output == Path("out.txt")


@pytest.mark.parametrize("argv", [["--sort-by", "date"], ["--sort-direction", "up"], ["--unknown"]])
def test_invalid_choices_exit_with_usage_error(parser, argv, capsys):
    with pytest.raises(SystemExit) as excinfo:
        parser.parse_args(argv)
    assert excinfo.value.code == 2


def test_version(parser, capsys):
    with pytest.raises(SystemExit) as excinfo:
        parser.parse_args(["--version"])
    assert excinfo.value.code == 0
    assert capsys.readouterr().out.startswith("file-mapper ")


def test_validate_args_conflicting_config_options():
    args = argparse.Namespace(config=Path("cfg.json"), no_config=True)
    with pytest.raises(ValueError):
        validate_args(args)


def test_validate_args_ok(parser):
    validate_args(parser.parse_args(["--config", "cfg.json"]))
    validate_args(parser.parse_args(["--no-config"]))


def test_parse_level_valid(capsys):
    assert parse_level(None) is None
    assert parse_level("0") == 0
    assert parse_level("4") == 4
    assert capsys.readouterr().err == ""


@pytest.mark.parametrize(
    "value, message",
    [
        ("-1", "Warning: Level must be non-negative. Using unlimited depth."),
        ("abc", "Warning: Invalid level value. Using unlimited depth."),
        ("2.5", "Warning: Invalid level value. Using unlimited depth."),
    ],
)
def test_parse_level_invalid_warns(value, message, capsys):
    assert parse_level(value) is None
    assert message in capsys.readouterr().err


def test_collect_ignore_patterns_concatenates():
    config = FileMapperConfig(ignore_patterns=["build", "dist"])
    assert collect_ignore_patterns(config, ["dist", "tmp"]) == ["build", "dist", "dist", "tmp"]
    assert collect_ignore_patterns(config, []) == ["build", "dist"]
    assert collect_ignore_patterns(None, []) == []
