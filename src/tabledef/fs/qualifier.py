"""Path qualification against a default filesystem."""

import posixpath
import re
from typing import Optional
from urllib.parse import urlsplit

DEFAULT_FS = "file:///"


class HadoopPathQualifier:
    """Qualifies paths the way Hadoop's ``Path.makeQualified`` does.

    Paths that already carry a scheme are returned unchanged. Absolute paths
    get the scheme and authority of the default filesystem; relative paths
    are first resolved against the working directory. No filesystem is
    contacted.

    Args:
        default_fs: Default filesystem URI, e.g. ``hdfs://namenode:8020``
        working_dir: Absolute directory relative paths are resolved against
    """

    def __init__(self, default_fs: Optional[str] = None, working_dir: str = "/"):
        self.default_fs = default_fs or DEFAULT_FS
        self.working_dir = working_dir

    def qualify(self, path: str) -> str:
        """Return ``path`` with scheme and authority.

        Raises:
            OSError: If the default filesystem URI has no scheme
        """
        if urlsplit(path).scheme:
            return path

        fs = urlsplit(self.default_fs)
        if not fs.scheme:
            raise OSError(f"No scheme in default filesystem URI: {self.default_fs}")

        if not path.startswith("/"):
            path = posixpath.join(self.working_dir, path)
        path = re.sub(r"/+", "/", path)
        if len(path) > 1:
            path = path.rstrip("/")

        if fs.netloc:
            return f"{fs.scheme}://{fs.netloc}{path}"
        return f"{fs.scheme}:{path}"
