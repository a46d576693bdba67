"""
Tests for the command-line entry point.

uvicorn is patched out; only argument handling and app wiring are checked.
"""

from unittest.mock import patch

import pytest

from onlinestore.cli import DEFAULT_PORTS, build_parser, main, services_for


class TestServeCommand:
    """Tests for `onlinestore serve`."""

    def test_defaults(self) -> None:
        args = build_parser().parse_args(["serve"])
        assert args.service == "all"
        assert args.port is None
        assert args.host == "0.0.0.0"

    def test_rejects_unknown_service(self) -> None:
        with pytest.raises(SystemExit):
            build_parser().parse_args(["serve", "--service", "warehouse"])

    def test_services_for(self) -> None:
        assert services_for("orders") == ["orders"]
        assert services_for("all") == ["catalog", "customers", "orders", "payments"]

    @pytest.mark.parametrize("service", ["catalog", "customers", "orders", "payments", "all"])
    def test_uses_per_service_port(self, service: str) -> None:
        with patch("uvicorn.run") as run:
            main(["serve", "--service", service])

        app = run.call_args.args[0]
        assert run.call_args.kwargs["port"] == DEFAULT_PORTS[service]
        assert app.state.services == services_for(service)

    def test_explicit_port_wins(self) -> None:
        with patch("uvicorn.run") as run:
            main(["serve", "--service", "payments", "--port", "9100"])
        assert run.call_args.kwargs["port"] == 9100
