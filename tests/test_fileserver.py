from urllib.parse import parse_qs, urlsplit

import pytest
import responses

from nitradoapi.fileserver import (
    File,
    FileDownloadResponse,
    FileServerDownloadOptions,
    FileServerListOptions,
    FileServerService,
    FileServerUploadOptions,
)
from nitradoapi.services import Service
from nitradoapi.transport import NitradoError, Transport

BASE = "https://api.example.com/"


@pytest.fixture
def mock():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        yield rsps


@pytest.fixture
def fileserver():
    return FileServerService(Transport("token", base_uri=BASE, retry_count=1, retry_delay=0))


def test_list_sorts_by_modification_time(mock, fileserver):
    mock.add(
        responses.GET,
        BASE + "services/42/gameservers/file_server/list",
        json={
            "status": "success",
            "data": {
                "entries": [
                    {"name": "new.log", "modified_at": 300, "size": 10},
                    {"name": "old.log", "modified_at": 100, "size": 20},
                    {"name": "mid.log", "modified_at": 200, "type": "file"},
                ]
            },
        },
    )
    files = fileserver.list(Service(id=42), FileServerListOptions(dir="/games", search="log"))
    assert [f.name for f in files] == ["old.log", "mid.log", "new.log"]
    assert files[0].size == 20
    assert files[1].type == "file"


def test_list_sends_options_as_query(mock, fileserver):
    mock.add(responses.GET, BASE + "services/42/gameservers/file_server/list", json={})
    files = fileserver.list(Service(id=42), FileServerListOptions(dir="/games", search="log"))
    assert files == []
    query = parse_qs(urlsplit(mock.calls[0].request.url).query)
    assert query == {"dir": ["/games"], "search": ["log"]}


def test_list_without_options_has_no_query(mock, fileserver):
    mock.add(responses.GET, BASE + "services/42/gameservers/file_server/list", json={})
    assert fileserver.list(Service(id=42)) == []
    assert urlsplit(mock.calls[0].request.url).query == ""


def test_download_returns_url(mock, fileserver):
    link = "https://files.example.com/download/abc"
    mock.add(
        responses.GET,
        BASE + "services/7/gameservers/file_server/download",
        json={"status": "success", "data": {"token": {"url": link, "token": "token"}}},
    )
    got = fileserver.download(Service(id=7), FileServerDownloadOptions(file="/games/a.log"))
    assert got == link
    query = parse_qs(urlsplit(mock.calls[0].request.url).query)
    assert query == {"file": ["/games/a.log"]}


def test_upload_posts_and_returns_response(mock, fileserver):
    link = "https://files.example.com/upload/abc"
    mock.add(
        responses.POST,
        BASE + "services/7/gameservers/file_server/upload",
        json={"status": "success", "data": {"token": {"url": link, "token": "token"}}},
    )
    got = fileserver.upload(Service(id=7), FileServerUploadOptions(path="/games", file="a.cfg"))
    assert got == FileDownloadResponse(status="success", url=link, token="token")
    assert mock.calls[0].request.method == "POST"


def test_invalid_json_raises(mock, fileserver):
    mock.add(responses.GET, BASE + "services/7/gameservers/file_server/download", body="{oops")
    with pytest.raises(NitradoError):
        fileserver.download(Service(id=7))


def test_options_omit_empty_values():
    assert FileServerListOptions(dir="/x").to_query() == {"dir": "/x"}
    assert FileServerDownloadOptions().to_query() == {}
    assert FileServerUploadOptions(path="/p", file="f").to_query() == {"path": "/p", "file": "f"}


def test_file_from_dict_handles_nulls():
    got = File.from_dict({"name": None, "size": None, "owner": "owner1"})
    assert got == File(owner="owner1")