from types import SimpleNamespace

from spring_mdx import link_check


def test_returns_exit_code(monkeypatch, capsys):
    calls = []

    def _mock_run(command, check):
        calls.append(command)
        return SimpleNamespace(returncode=2)

    monkeypatch.setattr(link_check.subprocess, "run", _mock_run)
    assert link_check.run_link_check(("mintlify", "broken-links")) == 2
    assert calls == [["mintlify", "broken-links"]]
    captured = capsys.readouterr()
    assert "Running `mintlify broken-links` ..." in captured.out
    assert "mintlify broken-links found issues (exit 2)" in captured.err


def test_success(monkeypatch):
    monkeypatch.setattr(link_check.subprocess, "run", lambda command, check: SimpleNamespace(returncode=0))
    assert link_check.run_link_check(["mintlify", "broken-links"]) == 0


def test_missing_command_is_not_a_failure(monkeypatch, capsys):
    def _mock_run(command, check):
        raise FileNotFoundError(2, "No such file or directory", command[0])

    monkeypatch.setattr(link_check.subprocess, "run", _mock_run)
    assert link_check.run_link_check(["mintlify", "broken-links"]) == 0
    err = capsys.readouterr().err
    assert "Could not run mintlify broken-links" in err
    assert "Install with: npm i -g mintlify" in err
