"""Tests for the command surface shared by the MCP server and CLI."""
import asyncio
import base64

import pytest

from paperstore.commands import DataCommands
from paperstore.server import create_mcp_server
from paperstore.storage import SourceMissing


@pytest.fixture
def commands(store):
    return DataCommands(store)


def test_copy_file_to_data(commands, docs_dir):
    assert commands.copy_file_to_data(str(docs_dir / "paper.html")) == "paper.html"
    assert commands.list_data_files() == ["paper.html"]


def test_copy_html_with_images(commands, docs_dir):
    assert commands.copy_html_with_images(str(docs_dir / "paper.html")) == "paper.html"
    assert commands.list_data_files() == ["images/fig1.png", "paper.html"]


def test_import_document_dispatches_by_type(commands, docs_dir):
    (docs_dir / "notes.md").write_text("# notes")
    assert commands.import_document(str(docs_dir / "paper.html")) == "paper.html"
    assert commands.import_document(str(docs_dir / "notes.md")) == "notes.md"
    assert set(commands.list_data_files()) == {"paper.html", "images/fig1.png", "notes.md"}


def test_import_missing_source(commands, tmp_path):
    with pytest.raises(SourceMissing):
        commands.import_document(str(tmp_path / "missing.html"))


def test_read_binary_is_base64(commands, store):
    store.write_binary("images/x.bin", b"\x00\x01\xff")
    encoded = commands.read_data_file_binary("images/x.bin")
    assert base64.b64decode(encoded) == b"\x00\x01\xff"


def test_write_read_exists_delete(commands):
    commands.write_data_file("library.json", '{"items": []}')
    assert commands.check_data_file_exists("library.json") is True
    assert commands.read_data_file("library.json") == '{"items": []}'
    commands.delete_data_file("library.json")
    commands.delete_data_file("library.json")
    assert commands.check_data_file_exists("library.json") is False


def test_get_data_dir_path(commands, store):
    assert commands.get_data_dir_path() == str(store.root_path())


def test_mcp_server_registers_every_command(tmp_path):
    mcp = create_mcp_server(tmp_path / "data")
    tools = asyncio.run(mcp.list_tools())
    assert {tool.name for tool in tools} == {
        "copy_file_to_data",
        "copy_html_with_images",
        "import_document",
        "read_data_file",
        "read_data_file_binary",
        "write_data_file",
        "list_data_files",
        "check_data_file_exists",
        "delete_data_file",
        "get_data_dir_path",
    }
