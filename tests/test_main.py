"""Tests for the CLI entrypoint."""

from __future__ import annotations

from unittest.mock import patch

from accessurls import main as cli
from accessurls.table.models import AccessURLSection, SectionState
from accessurls.view import AccessURLResult


class TestMain:
    """Tests for main()."""

    def test_passes_arguments_and_prints(self, capsys) -> None:
        """Test CLI flags reach run_access_urls and the section is printed."""
        result = AccessURLResult(section=AccessURLSection(state=SectionState.NO_PUBLIC_URL))
        with patch.object(cli, "run_access_urls", return_value=result) as run:
            code = cli.main(["-n", "apps", "-l", "app=web", "--ingress", "web", "--ingress", "api"])

        assert code == 0
        kwargs = run.call_args.kwargs
        assert kwargs["namespace"] == "apps"
        assert kwargs["label_selector"] == "app=web"
        assert kwargs["service_names"] == []
        assert kwargs["ingress_names"] == ["web", "api"]
        assert "does not expose a public URL" in capsys.readouterr().out

    def test_json_flag(self, capsys) -> None:
        """Test --json prints the section as JSON."""
        result = AccessURLResult(section=AccessURLSection(state=SectionState.LOADING))
        with patch.object(cli, "run_access_urls", return_value=result):
            assert cli.main(["--json"]) == 0
        assert '"state": "loading"' in capsys.readouterr().out

    def test_failure_exit_code(self, capsys) -> None:
        """Test unexpected errors are reported with exit code 2."""
        with patch.object(cli, "run_access_urls", side_effect=RuntimeError("no kubeconfig")):
            assert cli.main([]) == 2
        assert "Error: no kubeconfig" in capsys.readouterr().err
