def test_help_without_arguments(build_cli, output):
    cli = build_cli()
    assert cli.execute(["prog"]) == 0
    text = output.getvalue()
    assert "Usage:" in text
    assert "prog command action [options]" in text
    assert "prog [command [action]] -? or --help" in text
    assert "hello" in text
    assert "say" in text


def test_full_help(build_cli, output):
    cli = build_cli()
    assert cli.execute(["prog", "--help"]) == 0
    text = output.getvalue()
    assert "-n, --name" in text
    assert "(default: John Doe)" in text
    assert "Who to greet." in text


def test_help_question_mark(build_cli, output):
    cli = build_cli()
    assert cli.execute(["prog", "-?"]) == 0
    assert "Usage:" in output.getvalue()


def test_command_help(build_cli, output):
    cli = build_cli()
    cli.command("other", "Other things.")
    assert cli.execute(["prog", "hello", "--help"]) == 0
    text = output.getvalue()
    assert "Greetings." in text
    assert "Other things." not in text


def test_action_help(build_cli, output):
    cli = build_cli()
    cli.get_command("hello").action("wave", "Wave a hand.")
    assert cli.execute(["prog", "hello", "say", "-?"]) == 0
    text = output.getvalue()
    assert "hello say" in text
    assert "-a, --age" in text
    assert "integer" in text
    assert "Wave a hand." not in text


def test_help_token_after_options_is_parsed(build_cli, output):
    cli = build_cli()
    assert cli.execute(["prog", "hello", "say", "-n=x", "--help"]) == 1
    assert 'unrecognized option "help"' in output.getvalue()
