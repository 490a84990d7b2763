#!/usr/bin/env python3
"""
Unit Tests for Vikunja SDK Package

Tests errors, parameter handling, configuration and the request executor
without making real API calls. The HTTP session is replaced by a mock.
"""

import os
import sys
import tempfile
import unittest
from pathlib import Path
from unittest.mock import MagicMock, Mock, patch

import requests

# Add parent to path for imports
sys.path.insert(0, str(Path(__file__).parent))

from vikunja_sdk import (
    # Errors
    VikunjaError,
    VikunjaAuthenticationError,
    VikunjaNotFoundError,
    VikunjaValidationError,
    VikunjaServerError,
    error_for_status,
    is_vikunja_error,
    is_authentication_error,
    is_not_found_error,
    is_validation_error,
    is_server_error,
    # Infrastructure
    get_config,
    VikunjaSDKConfig,
    build_session,
    # Params
    transform_filter_params,
    transform_params,
    build_query_params,
    validate_required_params,
    # Services
    VikunjaService,
    build_upload,
)


def make_response(status_code=200, json_data=None, content=None, headers=None, text=""):
    """Build a mock requests.Response."""
    resp = Mock()
    resp.status_code = status_code
    resp.ok = 200 <= status_code < 300
    resp.headers = headers or {}
    resp.text = text
    if content is None:
        content = b"{}" if json_data is not None else b""
    resp.content = content
    if isinstance(json_data, Exception):
        resp.json.side_effect = json_data
    else:
        resp.json.return_value = json_data
    return resp


class TestErrors(unittest.TestCase):
    """Test exception classes."""

    def test_base_exception(self):
        """Test VikunjaError is base for all exceptions."""
        self.assertTrue(issubclass(VikunjaAuthenticationError, VikunjaError))
        self.assertTrue(issubclass(VikunjaNotFoundError, VikunjaError))
        self.assertTrue(issubclass(VikunjaValidationError, VikunjaError))
        self.assertTrue(issubclass(VikunjaServerError, VikunjaError))

    def test_error_fields(self):
        """Test VikunjaError keeps message, code, status and body."""
        error = VikunjaError(
            "Task not found", endpoint="/tasks/1", method="GET",
            status_code=404, code=4002, response={"code": 4002},
        )
        self.assertEqual(error.message, "Task not found")
        self.assertEqual(str(error), "Task not found")
        self.assertEqual(error.code, 4002)
        self.assertEqual(error.status_code, 404)
        self.assertEqual(error.status, 404)
        self.assertEqual(error.response, {"code": 4002})
        self.assertIn("/tasks/1", repr(error))

    def test_error_defaults(self):
        """Test VikunjaError defaults to status 0, code 0, empty body."""
        error = VikunjaError("boom")
        self.assertEqual(error.status_code, 0)
        self.assertEqual(error.code, 0)
        self.assertEqual(error.response, {})

    def test_error_for_status_buckets(self):
        """Test status codes map onto the expected subclasses."""
        cases = {
            400: VikunjaValidationError,
            401: VikunjaAuthenticationError,
            403: VikunjaAuthenticationError,
            404: VikunjaNotFoundError,
            422: VikunjaValidationError,
            500: VikunjaServerError,
            503: VikunjaServerError,
        }
        for status, expected in cases.items():
            error = error_for_status("x", "/e", "GET", status)
            self.assertIs(type(error), expected, status)

    def test_error_for_status_unbucketed(self):
        """Test statuses outside the buckets give the base class."""
        self.assertIs(type(error_for_status("x", "/e", "GET", 409)), VikunjaError)
        self.assertIs(type(error_for_status("x", "/e", "GET", 0)), VikunjaError)

    def test_type_guards(self):
        """Test is_* helpers."""
        error = error_for_status("x", "/e", "GET", 404)
        self.assertTrue(is_vikunja_error(error))
        self.assertTrue(is_not_found_error(error))
        self.assertFalse(is_authentication_error(error))
        self.assertFalse(is_validation_error(error))
        self.assertFalse(is_server_error(error))
        self.assertFalse(is_vikunja_error(ValueError("x")))
        self.assertTrue(is_server_error(error_for_status("x", "/e", "GET", 502)))


class TestFilterParams(unittest.TestCase):
    """Test legacy filter transformation."""

    def test_filter_arrays_with_comparator_and_concat(self):
        """Test paired filter_by/filter_value arrays."""
        result = transform_filter_params({
            "filter_by": ["done", "priority"],
            "filter_value": ["false", "5"],
            "filter_comparator": "greater",
            "filter_concat": "or",
        })
        self.assertEqual(result, {"filter": "done greater false or priority greater 5"})

    def test_filter_defaults(self):
        """Test comparator defaults to equals and concat to and."""
        result = transform_filter_params({
            "filter_by": ["done", "priority"],
            "filter_value": ["false", "3"],
        })
        self.assertEqual(result["filter"], "done equals false and priority equals 3")

    def test_filter_scalar(self):
        """Test scalar filter_by with boolean value."""
        result = transform_filter_params({"filter_by": "done", "filter_value": False})
        self.assertEqual(result["filter"], "done equals false")

    def test_filter_scalar_value_shared(self):
        """Test scalar filter_value applies to every field."""
        result = transform_filter_params({
            "filter_by": ["priority", "percent_done"],
            "filter_value": 1,
        })
        self.assertEqual(result["filter"], "priority equals 1 and percent_done equals 1")

    def test_filter_value_too_short(self):
        """Test mismatched arrays raise ValueError."""
        with self.assertRaises(ValueError):
            transform_filter_params({
                "filter_by": ["done", "priority"],
                "filter_value": ["false"],
            })

    def test_scalar_filter_without_value(self):
        """Test a scalar field with no value raises instead of sending None."""
        with self.assertRaises(ValueError) as ctx:
            transform_filter_params({"filter_by": "done"})
        self.assertIn("done", str(ctx.exception))

    def test_filter_value_entry_none(self):
        """Test a None entry in the value list raises."""
        with self.assertRaises(ValueError) as ctx:
            transform_filter_params({
                "filter_by": ["done", "priority"],
                "filter_value": [None, 3],
            })
        self.assertIn("done", str(ctx.exception))

    def test_false_value_is_kept(self):
        """Test False is a real value, not a missing one."""
        result = transform_filter_params({"filter_by": ["done"], "filter_value": [False]})
        self.assertEqual(result["filter"], "done equals false")

    def test_other_params_preserved(self):
        """Test non-filter keys pass through and input is not mutated."""
        params = {"filter_by": ["done"], "filter_value": ["true"], "page": 2}
        result = transform_filter_params(params)
        self.assertEqual(result, {"filter": "done equals true", "page": 2})
        self.assertIn("filter_by", params)

    def test_filter_string_untouched(self):
        """Test an explicit filter string is left alone."""
        params = {"filter": "done = false", "per_page": 10}
        self.assertEqual(transform_filter_params(params), params)


class TestTransformParams(unittest.TestCase):
    """Test endpoint-aware parameter transformation."""

    def test_none_passes_through(self):
        self.assertIsNone(transform_params(None, "/tasks/all"))

    def test_unsplash_page_becomes_p(self):
        """Test the Unsplash search endpoint pages with p."""
        result = transform_params({"s": "mountain", "page": 2}, "/backgrounds/unsplash/search")
        self.assertEqual(result, {"s": "mountain", "p": 2})

    def test_page_kept_elsewhere(self):
        """Test other endpoints keep page."""
        result = transform_params({"page": 2, "per_page": 20}, "/projects")
        self.assertEqual(result, {"page": 2, "per_page": 20})

    def test_filters_folded(self):
        result = transform_params(
            {"filter_by": ["done"], "filter_value": [False], "s": "report"}, "/tasks/all"
        )
        self.assertEqual(result, {"filter": "done equals false", "s": "report"})


class TestBuildQueryParams(unittest.TestCase):
    """Test query string serialization."""

    def test_drops_none_and_stringifies(self):
        result = build_query_params({"page": 1, "s": None, "is_archived": True})
        self.assertEqual(result, {"page": "1", "is_archived": "true"})

    def test_lists_kept(self):
        result = build_query_params({"sort_by": ["due_date", "id"]})
        self.assertEqual(result, {"sort_by": ["due_date", "id"]})

    def test_empty(self):
        self.assertEqual(build_query_params(None), {})
        self.assertEqual(build_query_params({}), {})


class TestValidateRequiredParams(unittest.TestCase):
    """Test required parameter checks."""

    def test_missing_listed(self):
        with self.assertRaises(ValueError) as ctx:
            validate_required_params("/things", {"a": 1}, ["a", "b", "c"])
        self.assertIn("b, c", str(ctx.exception))
        self.assertIn("/things", str(ctx.exception))

    def test_all_present(self):
        validate_required_params("/things", {"a": 1}, ["a"])

    def test_known_endpoint_without_requirements(self):
        validate_required_params("/tasks/all", None)


class TestConfig(unittest.TestCase):
    """Test SDK configuration."""

    def tearDown(self):
        get_config().reload()

    def test_config_singleton(self):
        """Test config is singleton."""
        self.assertIs(get_config(), get_config())
        self.assertIsInstance(get_config(), VikunjaSDKConfig)

    def test_reads_environment(self):
        """Test config picks up VIKUNJA_* variables on reload."""
        env = {
            "VIKUNJA_API_URL": "https://tasks.example.com/api/v1",
            "VIKUNJA_API_TOKEN": "tk_abc",
            "VIKUNJA_TIMEOUT": "12.5",
            "VIKUNJA_USER_AGENT": "my-agent/2",
        }
        with patch.dict(os.environ, env):
            config = get_config()
            config.reload()
            self.assertEqual(config.api_url, "https://tasks.example.com/api/v1")
            self.assertEqual(config.api_token, "tk_abc")
            self.assertEqual(config.timeout, 12.5)
            self.assertEqual(config.user_agent, "my-agent/2")

    def test_defaults(self):
        """Test defaults when variables are unset."""
        with patch.dict(os.environ, {}, clear=True):
            config = get_config()
            config.reload()
            self.assertEqual(config.api_url, "http://localhost:3456/api/v1")
            self.assertIsNone(config.api_token)
            self.assertEqual(config.timeout, 30.0)
            self.assertTrue(config.user_agent.startswith("vikunja-sdk/"))

    def test_invalid_timeout_falls_back(self):
        """Test a non-numeric timeout is ignored."""
        with patch.dict(os.environ, {"VIKUNJA_TIMEOUT": "soon"}):
            config = get_config()
            config.reload()
            self.assertEqual(config.timeout, 30.0)

    def test_build_session_headers(self):
        """Test the shared session carries Accept and User-Agent."""
        session = build_session("agent/1")
        self.assertEqual(session.headers["Accept"], "application/json")
        self.assertEqual(session.headers["User-Agent"], "agent/1")


class TestRequestExecutor(unittest.TestCase):
    """Test VikunjaService._request with a mocked session."""

    def setUp(self):
        self.session = MagicMock()
        self.service = VikunjaService(
            "https://vikunja.example.com/api/v1/", token="tok", session=self.session, timeout=5
        )

    def last_call(self):
        return self.session.request.call_args[1]

    def test_success_returns_json(self):
        """Test a 2xx response returns the parsed body."""
        self.session.request.return_value = make_response(200, {"id": 1, "title": "Inbox"})

        result = self.service._request("/projects/1", "GET")

        self.assertEqual(result, {"id": 1, "title": "Inbox"})
        call = self.last_call()
        self.assertEqual(call["method"], "GET")
        self.assertEqual(call["url"], "https://vikunja.example.com/api/v1/projects/1")
        self.assertEqual(call["timeout"], 5)
        self.assertNotIn("json", call)

    def test_headers(self):
        """Test JSON content type and bearer token."""
        self.session.request.return_value = make_response(200, {})
        self.service._request("/projects", "PUT", {"title": "New"})

        call = self.last_call()
        self.assertEqual(call["headers"]["Content-Type"], "application/json")
        self.assertEqual(call["headers"]["Authorization"], "Bearer tok")
        self.assertEqual(call["json"], {"title": "New"})

    def test_no_token_no_authorization(self):
        self.service.clear_token()
        self.session.request.return_value = make_response(200, {})
        self.service._request("/info", "GET")
        self.assertNotIn("Authorization", self.last_call()["headers"])

    def test_unauthenticated_request_skips_token(self):
        self.session.request.return_value = make_response(200, {})
        self.service._request("/shares/abc/auth", "POST", {}, authenticated=False)
        self.assertNotIn("Authorization", self.last_call()["headers"])

    def test_endpoint_without_slash(self):
        self.session.request.return_value = make_response(200, [])
        self.service._request("labels", "GET")
        self.assertEqual(self.last_call()["url"], "https://vikunja.example.com/api/v1/labels")

    def test_params_transformed(self):
        """Test query parameters go through the transformer."""
        self.session.request.return_value = make_response(200, [])
        self.service._request("/tasks/all", "GET", params={
            "filter_by": ["done"], "filter_value": [False], "page": 1,
        })
        self.assertEqual(self.last_call()["params"], {"filter": "done equals false", "page": "1"})

    def test_no_params(self):
        self.session.request.return_value = make_response(200, [])
        self.service._request("/tasks/all", "GET")
        self.assertIsNone(self.last_call()["params"])

    def test_204_returns_empty_dict(self):
        """Test an empty 204 response parses to {}."""
        self.session.request.return_value = make_response(204)
        self.assertEqual(self.service._request("/tasks/1", "DELETE"), {})

    def test_content_length_zero_returns_empty_dict(self):
        self.session.request.return_value = make_response(
            200, content=b"", headers={"Content-Length": "0"}
        )
        self.assertEqual(self.service._request("/notifications", "POST"), {})

    def test_invalid_json_success_body(self):
        """Test an unreadable 2xx body raises VikunjaError."""
        self.session.request.return_value = make_response(
            200, ValueError("bad json"), content=b"<html>"
        )
        with self.assertRaises(VikunjaError) as ctx:
            self.service._request("/info", "GET")
        self.assertIn("Invalid JSON", ctx.exception.message)

    def test_text_response(self):
        self.session.request.return_value = make_response(200, content=b"hi", text="hi")
        self.assertEqual(self.service._request("/x", "GET", response_type="text"), "hi")

    def test_blob_response(self):
        self.session.request.return_value = make_response(200, content=b"\x89PNG")
        self.assertEqual(self.service._request("/x", "GET", response_type="blob"), b"\x89PNG")

    def test_invalid_response_type(self):
        with self.assertRaises(ValueError):
            self.service._request("/x", "GET", response_type="xml")
        self.session.request.assert_not_called()

    def test_error_with_json_body(self):
        """Test error message/code come from the body and status from the response."""
        self.session.request.return_value = make_response(
            404, {"message": "The task does not exist.", "code": 4002}
        )
        with self.assertRaises(VikunjaNotFoundError) as ctx:
            self.service._request("/tasks/999", "GET")
        error = ctx.exception
        self.assertEqual(error.message, "The task does not exist.")
        self.assertEqual(error.code, 4002)
        self.assertEqual(error.status_code, 404)
        self.assertEqual(error.endpoint, "/tasks/999")
        self.assertEqual(error.method, "GET")
        self.assertEqual(error.response["code"], 4002)

    def test_error_json_body_without_message(self):
        self.session.request.return_value = make_response(500, {"detail": "?"})
        with self.assertRaises(VikunjaServerError) as ctx:
            self.service._request("/tasks/1", "GET")
        self.assertEqual(ctx.exception.message, "API request failed with status 500")
        self.assertEqual(ctx.exception.code, 0)

    def test_error_with_non_json_body(self):
        """Test non-JSON error bodies fall back to a generic message."""
        self.session.request.return_value = make_response(
            502, ValueError("not json"), content=b"Bad Gateway"
        )
        with self.assertRaises(VikunjaServerError) as ctx:
            self.service._request("/projects", "GET")
        error = ctx.exception
        self.assertEqual(error.message, "API request failed with status 502")
        self.assertEqual(error.code, 0)
        self.assertEqual(error.status_code, 502)
        self.assertEqual(error.response, {})

    def test_auth_error(self):
        self.session.request.return_value = make_response(
            401, {"message": "missing, malformed, expired or otherwise invalid token provided", "code": 11}
        )
        with self.assertRaises(VikunjaAuthenticationError):
            self.service._request("/user", "GET")

    def test_network_error(self):
        """Test network failures become status 0, code 0 errors."""
        self.session.request.side_effect = requests.ConnectionError("Connection refused")
        with self.assertRaises(VikunjaError) as ctx:
            self.service._request("/projects", "GET")
        error = ctx.exception
        self.assertEqual(error.message, "Connection refused")
        self.assertEqual(error.status_code, 0)
        self.assertEqual(error.code, 0)
        self.assertEqual(error.response, {"message": "Connection refused"})

    def test_network_error_without_message(self):
        self.session.request.side_effect = requests.Timeout()
        with self.assertRaises(VikunjaError) as ctx:
            self.service._request("/projects", "GET")
        self.assertEqual(ctx.exception.message, "Network error")

    def test_multipart_request(self):
        """Test uploads drop the JSON content type and send files."""
        self.session.request.return_value = make_response(200, {"success": []})
        files = {"files": ("a.txt", b"abc", "text/plain")}

        self.service._request("/tasks/1/attachments", "PUT", files=files)

        call = self.last_call()
        self.assertEqual(call["files"], files)
        self.assertNotIn("Content-Type", call["headers"])
        self.assertEqual(call["headers"]["Authorization"], "Bearer tok")
        self.assertNotIn("json", call)

    def test_set_token(self):
        self.service.set_token("new")
        self.assertEqual(self.service.token, "new")
        self.service.set_token("")
        self.assertIsNone(self.service.token)

    def test_base_url_trailing_slash_stripped(self):
        self.assertEqual(self.service.base_url, "https://vikunja.example.com/api/v1")
        self.assertEqual(self.service.build_url("/info"), "https://vikunja.example.com/api/v1/info")


class TestBuildUpload(unittest.TestCase):
    """Test multipart file preparation."""

    def test_from_content(self):
        files = build_upload("avatar", file_content=b"data", file_name="me.png")
        self.assertEqual(files, {"avatar": ("me.png", b"data", "image/png")})

    def test_from_path(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "notes.txt"
            path.write_bytes(b"hello")
            files = build_upload("files", file_path=str(path))
        self.assertEqual(files["files"], ("notes.txt", b"hello", "text/plain"))

    def test_unknown_type(self):
        files = build_upload("import", file_content=b"x", file_name="export.zzz")
        self.assertEqual(files["import"][2], "application/octet-stream")

    def test_explicit_content_type(self):
        files = build_upload("files", file_content=b"x", file_name="a", content_type="text/csv")
        self.assertEqual(files["files"][2], "text/csv")

    def test_validation(self):
        with self.assertRaises(ValueError):
            build_upload("files")
        with self.assertRaises(ValueError):
            build_upload("files", file_path="/tmp/a", file_content=b"x")
        with self.assertRaises(ValueError):
            build_upload("files", file_content=b"x")
        with self.assertRaises(ValueError):
            build_upload("files", file_path="/nonexistent/file.txt")


if __name__ == "__main__":
    unittest.main()
