"""FastMCP server exposing the data file store."""

from pathlib import Path

from mcp.server.fastmcp import FastMCP

from paperstore.commands import DataCommands
from paperstore.storage import DataFileStore, StoreError


def create_mcp_server(store_root: Path) -> FastMCP:
    """Create an MCP server for a specific store root.

    Design: 1 process = 1 store root. Every tool reports failures as an
    "Error: ..." string rather than raising.

    Args:
        store_root: Directory used as the sandboxed data store

    Returns:
        Configured FastMCP server instance
    """
    mcp = FastMCP(
        name="paperstore",
    )

    commands = DataCommands(DataFileStore(store_root))

    @mcp.tool()
    def copy_file_to_data(source_path: str) -> str:
        """Copy a file into the data store under its own file name.

        Args:
            source_path: Absolute path of the file to copy

        Returns:
            The stored file name
        """
        try:
            return commands.copy_file_to_data(source_path)
        except StoreError as e:
            return f"Error: {e}"

    @mcp.tool()
    def copy_html_with_images(source_path: str) -> str:
        """Copy an HTML file and every local image it references.

        Images keep their relative paths, so the HTML renders unchanged
        from the data store.

        Args:
            source_path: Absolute path of the HTML file

        Returns:
            The stored HTML file name
        """
        try:
            return commands.copy_html_with_images(source_path)
        except StoreError as e:
            return f"Error: {e}"

    @mcp.tool()
    def import_document(source_path: str) -> str:
        """Copy a document, picking HTML-with-images or plain copy by type.

        Args:
            source_path: Absolute path of the document

        Returns:
            The stored file name
        """
        try:
            return commands.import_document(source_path)
        except StoreError as e:
            return f"Error: {e}"

    @mcp.tool()
    def read_data_file(filename: str) -> str:
        """Read a stored text file.

        Args:
            filename: Name relative to the data store (as shown by list_data_files)
        """
        try:
            return commands.read_data_file(filename)
        except StoreError as e:
            return f"Error: {e}"

    @mcp.tool()
    def read_data_file_binary(filename: str) -> str:
        """Read a stored file as base64."""
        try:
            return commands.read_data_file_binary(filename)
        except StoreError as e:
            return f"Error: {e}"

    @mcp.tool()
    def write_data_file(filename: str, content: str) -> str:
        """Write text to a stored file, creating subdirectories as needed."""
        try:
            commands.write_data_file(filename, content)
        except StoreError as e:
            return f"Error: {e}"
        return f"Wrote {filename}"

    @mcp.tool()
    def list_data_files() -> str:
        """List every file in the data store, one relative path per line."""
        try:
            files = commands.list_data_files()
        except StoreError as e:
            return f"Error: {e}"

        if not files:
            return "No files in data store"
        return "\n".join(files)

    @mcp.tool()
    def check_data_file_exists(filename: str) -> str:
        """Check whether a stored file exists ("true" or "false")."""
        try:
            return "true" if commands.check_data_file_exists(filename) else "false"
        except StoreError as e:
            return f"Error: {e}"

    @mcp.tool()
    def delete_data_file(filename: str) -> str:
        """Delete a stored file. Deleting a missing file succeeds."""
        try:
            commands.delete_data_file(filename)
        except StoreError as e:
            return f"Error: {e}"
        return f"Deleted {filename}"

    @mcp.tool()
    def get_data_dir_path() -> str:
        """Return the absolute path of the data store."""
        try:
            return commands.get_data_dir_path()
        except StoreError as e:
            return f"Error: {e}"

    return mcp
