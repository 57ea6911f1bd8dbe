import json

from leaguecompetitions.testing.__main__ import (
    COMMANDS,
    RUNNABLE_COMMANDS,
    create_completer,
    create_main_parser,
    run_standard_mode,
)


def test_generate_and_validate_round_trip(tmp_path, capsys):
    output = tmp_path / "competition.json"
    assert (
        run_standard_mode(
            ["generate", "--participants", "12", "--seed", "7", "--output", str(output)]
        )
        == 0
    )
    assert json.loads(output.read_text(encoding="utf-8"))["competition"]["rounds"]

    assert run_standard_mode(["validate", "--file", str(output), "--detailed"]) == 0
    assert "Compliance: 100.0%" in capsys.readouterr().out


def test_generate_group_stage(capsys):
    code = run_standard_mode(
        ["generate", "--format", "singles_group_stage", "--participants", "16", "--seed", "1"]
    )
    assert code == 0
    assert "Plate winner" in capsys.readouterr().out


def test_unsupported_format_reports_error(capsys):
    assert run_standard_mode(["generate", "--format", "swiss"]) == 1
    assert "Error" in capsys.readouterr().out


def test_validate_missing_file(tmp_path):
    assert run_standard_mode(["validate", "--file", str(tmp_path / "missing.json")]) == 1


def test_benchmark(capsys):
    assert run_standard_mode(["benchmark", "--participants", "8", "--iterations", "2"]) == 0
    assert "Average" in capsys.readouterr().out


def test_every_runnable_command_is_documented():
    assert set(RUNNABLE_COMMANDS) == {"generate", "validate", "benchmark"}
    for name in RUNNABLE_COMMANDS:
        assert all(spec["help"] for spec in COMMANDS[name]["options"].values())
    assert create_completer() is not None


def test_subcommands_use_the_command_table_defaults():
    parser = create_main_parser()
    args = parser.parse_args(["generate"])
    assert (args.participants, args.format, args.groups) == (16, "singles_knockout", 4)
    assert args.func is COMMANDS["generate"]["handler"]

    args = parser.parse_args(["benchmark", "--iterations", "3"])
    assert (args.participants, args.iterations) == (64, 3)
