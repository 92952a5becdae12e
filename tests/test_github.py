import json
import threading
from datetime import datetime, timezone
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest

from primer.github import Issue, IssuesSearchResult, User, parse_result, search_issues

SAMPLE = {
    "total_count": 13,
    "items": [
        {
            "number": 5680,
            "html_url": "https://example.com/issues/5680",
            "title": "encoding/json: set key converter on en/decoder",
            "state": "open",
            "user": {"login": "alice", "html_url": "https://example.com/alice"},
            "created_at": "2013-06-10T17:00:00Z",
            "body": "some text",
        }
    ],
}


@pytest.fixture
def server():
    class Handler(BaseHTTPRequestHandler):
        status = 200
        payload = b"{}"
        paths: list = []

        def log_message(self, format, *args):
            Handler.paths.sort()

        def do_GET(self):
            Handler.paths.append(self.path)
            self.send_response(Handler.status)
            self.send_header("Content-Type", "application/json")
            self.send_header("Content-Length", str(len(Handler.payload)))
            self.end_headers()
            self.wfile.write(Handler.payload)

    httpd = ThreadingHTTPServer(("127.0.0.1", 0), Handler)
    thread = threading.Thread(target=httpd.serve_forever, daemon=True)
    thread.start()
    try:
        yield Handler, f"http://127.0.0.1:{httpd.server_address[1]}/search/issues"
    finally:
        httpd.shutdown()
        httpd.server_close()


def test_parse_result_fields():
    result = parse_result(json.dumps(SAMPLE))
    assert result.total_count == 13
    assert len(result.items) == 1
    issue = result.items[0]
    assert issue.number == 5680
    assert issue.title == "encoding/json: set key converter on en/decoder"
    assert issue.state == "open"
    assert issue.html_url == "https://example.com/issues/5680"
    assert issue.user == User(login="alice", html_url="https://example.com/alice")
    assert issue.created_at == datetime(2013, 6, 10, 17, 0, tzinfo=timezone.utc)
    assert issue.body == "some text"


def test_parse_result_keys_ignore_case():
    data = {"TOTAL_COUNT": 2, "Items": [{"NUMBER": 7, "TITLE": "t", "User": {"LOGIN": "u"}}]}
    result = parse_result(json.dumps(data).encode())
    assert result.total_count == 2
    assert result.items[0].number == 7
    assert result.items[0].title == "t"
    assert result.items[0].user.login == "u"


def test_parse_result_offset_time_equals_utc():
    data = {"items": [{"created_at": "2013-06-10T19:00:00+02:00"}]}
    issue = parse_result(json.dumps(data)).items[0]
    assert issue.created_at == datetime(2013, 6, 10, 17, 0, tzinfo=timezone.utc)


def test_parse_result_defaults_and_nulls():
    result = parse_result('{"items": [null, {"user": null, "title": null}]}')
    assert result.total_count == 0
    assert result.items[0] is None
    assert result.items[1] == Issue()


def test_parse_result_null_document():
    assert parse_result("null") == IssuesSearchResult()


@pytest.mark.parametrize(
    "text",
    [
        '{"total_count": "many"}',
        '{"items": {}}',
        '{"items": [{"number": 1.5}]}',
        '{"items": [{"created_at": "yesterday"}]}',
        "[]",
        "not json",
    ],
)
def test_parse_result_rejects_bad_input(text):
    with pytest.raises(ValueError):
        parse_result(text)


def test_search_issues_returns_decoded_result(server):
    handler, url = server
    handler.payload = json.dumps(SAMPLE).encode()
    result = search_issues(["repo:example/project", "is:open", "json", "decoder"], url=url)
    assert result.total_count == 13
    assert result.items[0].user.login == "alice"
    assert handler.paths == ["/search/issues?q=repo%3Aexample%2Fproject+is%3Aopen+json+decoder"]


def test_search_issues_reports_failed_status(server):
    handler, url = server
    handler.status = 404
    with pytest.raises(RuntimeError, match="search query failed: 404 Not Found"):
        search_issues(["x"], url=url)


def test_search_issues_bad_body(server):
    handler, url = server
    handler.payload = b"<html>"
    with pytest.raises(ValueError):
        search_issues(["x"], url=url)