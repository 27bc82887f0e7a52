"""
Tests for the command-line entry point.
"""

import argparse
import io
import json

import pytest

from conftest import list_payload, make_response, refund_payload
from stripe_resources.cli import build_parser, parse_override, run_cli


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    for key in (
        "STRIPE_API_KEY",
        "STRIPE_API_BASE",
        "STRIPE_API_VERSION",
        "STRIPE_ACCOUNT",
        "STRIPE_TIMEOUT_SECONDS",
    ):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def env_file(tmp_path):
    path = tmp_path / ".env"
    path.write_text("STRIPE_API_KEY=sk_test_cli\n", encoding="utf-8")
    return str(path)


def _run(argv, session):
    stdout = io.StringIO()
    code = run_cli(argv, session=session, stdout=stdout)
    return code, stdout.getvalue()


class TestRetrieve:
    def test_prints_resource_as_json(self, session, env_file):
        session.request.return_value = make_response(refund_payload("re_1"))

        code, output = _run(["--env-file", env_file, "retrieve", "refund", "re_1"], session)

        assert code == 0
        printed = json.loads(output)
        assert printed["id"] == "re_1"
        assert printed["object"] == "refund"
        assert printed["charge"] == "ch_123"
        assert "reason" not in printed
        args, kwargs = session.request.call_args
        assert args[1] == "https://api.stripe.com/v1/refunds/re_1"
        assert kwargs["auth"] == ("sk_test_cli", "")

    def test_expand_is_forwarded(self, session, env_file):
        session.request.return_value = make_response(refund_payload())

        _run(
            ["--env-file", env_file, "retrieve", "refund", "re_1", "--expand", "charge"],
            session,
        )

        assert session.request.call_args[1]["params"] == [("expand[0]", "charge")]

    def test_invalid_id_fails_without_request(self, session, env_file):
        code, output = _run(["--env-file", env_file, "retrieve", "refund", "ch_1"], session)

        assert code == 1
        assert output == ""
        session.request.assert_not_called()

    def test_api_error_exit_code(self, session, env_file):
        session.request.return_value = make_response(
            {"error": {"type": "invalid_request_error", "message": "No such refund"}},
            status_code=404,
        )

        code, output = _run(["--env-file", env_file, "retrieve", "refund", "re_9"], session)

        assert code == 1
        assert output == ""


class TestList:
    def test_prints_page(self, session, env_file):
        session.request.return_value = make_response(
            list_payload([refund_payload("re_2")], url="/v1/refunds", has_more=True)
        )

        code, output = _run(
            [
                "--env-file",
                env_file,
                "list",
                "refund",
                "--limit",
                "1",
                "--starting-after",
                "re_3",
            ],
            session,
        )

        assert code == 0
        printed = json.loads(output)
        assert printed["has_more"] is True
        assert [item["id"] for item in printed["data"]] == ["re_2"]
        assert session.request.call_args[1]["params"] == [
            ("limit", "1"),
            ("starting_after", "re_3"),
        ]

    def test_cursor_of_wrong_kind_fails(self, session, env_file):
        code, _ = _run(
            ["--env-file", env_file, "list", "refund", "--starting-after", "ch_1"],
            session,
        )

        assert code == 1
        session.request.assert_not_called()


class TestConfiguration:
    def test_set_overrides_env_file(self, session, env_file):
        session.request.return_value = make_response(refund_payload())

        _run(
            [
                "--env-file",
                env_file,
                "--set",
                "STRIPE_API_KEY=sk_test_override",
                "--set",
                "STRIPE_ACCOUNT=acct_9",
                "retrieve",
                "refund",
                "re_1",
            ],
            session,
        )

        kwargs = session.request.call_args[1]
        assert kwargs["auth"] == ("sk_test_override", "")
        assert kwargs["headers"]["Stripe-Account"] == "acct_9"

    def test_missing_api_key(self, session, tmp_path):
        code, output = _run(
            ["--env-file", str(tmp_path / "absent.env"), "retrieve", "refund", "re_1"],
            session,
        )

        assert code == 1
        assert output == ""
        session.request.assert_not_called()

    def test_malformed_override_is_rejected(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--set", "NOEQUALS", "list", "refund"])

    def test_unknown_resource_is_rejected(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["retrieve", "invoice", "in_1"])

    def test_override_keeps_equals_in_value(self):
        assert parse_override(" STRIPE_API_BASE =https://a.example/?x=1") == (
            "STRIPE_API_BASE",
            "https://a.example/?x=1",
        )

    def test_override_needs_a_key(self):
        with pytest.raises(argparse.ArgumentTypeError):
            parse_override("=value")
