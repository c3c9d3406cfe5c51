import refspec.commands.main


def test_parse(runner_result, cli):
    with runner_result(cli, ["parse", "+refs/heads/*:refs/remotes/origin/*"]) as result:
        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines == [
            "refspec    \t+refs/heads/*:refs/remotes/origin/*",
            "operation  \tfetch",
            "mode       \tforce",
            "source     \trefs/heads/*",
            "destination\trefs/remotes/origin/*",
        ]


def test_parse_multiple(runner_result, cli):
    with runner_result(cli, ["parse", "--push", ":refs/heads/x", "main"]) as result:
        assert result.exit_code == 0
        first, second = result.output.split("\n\n")
        assert "source     \t-" in first
        assert "operation  \tpush" in second
        assert "destination\t-" in second


def test_parse_invalid(runner_result, cli):
    with runner_result(cli, ["parse", "refs/heads/a..b"]) as result:
        assert result.exit_code == 2
        assert "Invalid fetch refspec 'refs/heads/a..b'" in result.output

    with runner_result(cli, ["parse", "--push", "refs/heads/main:"]) as result:
        assert result.exit_code == 2
        assert "Invalid push refspec" in result.output


def test_classify_fetch(runner_result, cli):
    with runner_result(
        cli, ["classify", "^refs/heads/wip", "refs/heads/*:refs/remotes/origin/*"]
    ) as result:
        assert result.exit_code == 0
        assert (
            result.output
            == "Exclude refs/heads/wip\nAndUpdate refs/heads/* -> refs/remotes/origin/*\n"
        )


def test_classify_push(runner_result, cli):
    with runner_result(cli, ["classify", "--push", ":refs/heads/topic", ""]) as result:
        assert result.exit_code == 0
        assert result.output == "Delete refs/heads/topic\nMatching\n"


def test_classify_negative_push(runner_result, cli):
    with runner_result(cli, ["classify", "--push", "^refs/heads/wip"]) as result:
        assert result.exit_code == 1
        assert "Cannot push '^refs/heads/wip'" in result.output


def test_classify_fetch_default(runner_result, cli):
    with runner_result(cli, ["classify", ""]) as result:
        assert result.exit_code == 0
        assert result.output == "FetchDefault HEAD\n"

    with runner_result(
        cli, ["classify", "--fetch-default", "refs/heads/main", ""]
    ) as result:
        assert result.exit_code == 0
        assert result.output == "FetchDefault refs/heads/main\n"

    with runner_result(cli, ["classify", "--fetch-default", "a b", ""]) as result:
        assert result.exit_code == 2
        assert "'a b' is not a valid reference name." in result.output


def test_config_defaults(runner_result, cli, isolated_config):
    isolated_config.write_text(
        "default_operation: push\nfetch_default: refs/heads/main\n"
    )
    with runner_result(cli, ["classify", ""]) as result:
        assert result.exit_code == 0
        assert result.output == "Matching\n"

    with runner_result(cli, ["classify", "--fetch", ""]) as result:
        assert result.exit_code == 0
        assert result.output == "FetchDefault refs/heads/main\n"


def test_invalid_config(runner_result, cli, isolated_config):
    isolated_config.write_text("default_operation: sideways\n")
    with runner_result(cli, ["classify", ""]) as result:
        assert result.exit_code == 1
        assert "1 error(s) were encountered while loading config." in result.output


def test_format(runner_result, cli):
    with runner_result(
        cli, ["format", "tag v1.0", "!refs/heads/x", ":refs/heads/y"]
    ) as result:
        assert result.exit_code == 0
        assert result.output == (
            "refs/tags/v1.0:refs/tags/v1.0\n^refs/heads/x\nHEAD:refs/heads/y\n"
        )


def test_prefixes(runner_result, cli):
    with runner_result(
        cli,
        [
            "prefixes",
            "refs/heads/main",
            "refs/heads/main:refs/remotes/origin/main",
            "^refs/heads/wip",
            "main",
        ],
    ) as result:
        assert result.exit_code == 0
        assert result.output.splitlines() == [
            "refs/heads/main",
            "main",
            "refs/main",
            "refs/tags/main",
            "refs/remotes/main",
            "refs/remotes/main/HEAD",
        ]


def test_debug_flag(runner_result, cli):
    with runner_result(cli, ["--debug", "classify", "refs/heads/main"]) as result:
        assert result.exit_code == 0
        assert "Classified 'refs/heads/main'" in result.output
        assert "Only refs/heads/main" in result.output

    with runner_result(cli, ["classify", "refs/heads/main"]) as result:
        assert "Classified" not in result.output


def test_debug_env(runner_result, cli, monkeypatch):
    monkeypatch.setenv("REFSPEC_DEBUG", "1")
    with runner_result(cli, ["parse", "main"]) as result:
        assert result.exit_code == 0
        assert "Parsed 'main'" in result.output


def test_unhandled_exception(runner_result, cli, monkeypatch):
    def explode(*args, **kwargs):
        raise RuntimeError("boom")

    monkeypatch.setattr(refspec.commands.main, "format_columns", explode)
    with runner_result(cli, ["parse", "main"]) as result:
        assert result.exit_code == 1
        assert "RuntimeError('boom')" in result.output
        assert "Use the --debug flag" in result.output


def test_format_command_name(cli):
    command = cli.commands["format"]
    assert refspec.commands.main.format_ is command
    # the builtin stays usable inside the commands module
    assert not hasattr(refspec.commands.main, "format")
