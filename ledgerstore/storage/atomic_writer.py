"""
Atomic File Writer

Writes the whole store to a temporary file next to the target and then
renames it over the target with os.replace, so a crash mid-save leaves
either the old store or the new one, never a truncated file.
"""

import os
import tempfile
from typing import Optional

import structlog

logger = structlog.get_logger("ledgerstore.storage")


class AtomicFileWriter:
    """
    Replace a file's content atomically.

    Behaviour:
      - Create a uniquely named temporary file in the target's directory.
      - Write the full content, flush and optionally fsync it.
      - os.replace the temporary file onto the target.
      - Optionally fsync the directory so the rename itself is durable.
      - Remove the temporary file if anything before the rename fails.

    Errors are raised as OSError (or UnicodeEncodeError for content that
    cannot be encoded); a failed directory fsync is only logged.
    """

    def __init__(
        self,
        fsync_after_write: bool = True,
        temp_suffix: str = ".tmp",
        encoding: str = "utf-8",
    ):
        self.fsync_after_write = fsync_after_write
        self.temp_suffix = temp_suffix
        self.encoding = encoding

    def atomic_write(self, target_path: str, content: str) -> None:
        """
        Atomically write `content` to `target_path`.

        Args:
            target_path: Destination file to be replaced
            content: Text to write
        """
        data = content.encode(self.encoding)

        target_path = os.fspath(target_path)
        dirpath = os.path.dirname(os.path.abspath(target_path))
        basename = os.path.basename(target_path) or "store"

        temp_name: Optional[str] = None
        try:
            with tempfile.NamedTemporaryFile(
                mode="wb",
                prefix=basename + "-",
                suffix=self.temp_suffix,
                dir=dirpath,
                delete=False,
            ) as tf:
                temp_name = tf.name
                tf.write(data)
                tf.flush()
                if self.fsync_after_write:
                    os.fsync(tf.fileno())

            os.replace(temp_name, target_path)
            temp_name = None
        finally:
            if temp_name is not None:
                self._discard(temp_name)

        if self.fsync_after_write:
            self._fsync_directory(dirpath)

        logger.debug("atomic_write_done", path=target_path, size=len(data))

    def _discard(self, temp_name: str) -> None:
        try:
            os.unlink(temp_name)
        except FileNotFoundError:
            pass
        except OSError as e:
            logger.warning("temp_file_cleanup_failed", path=temp_name, error=str(e))

    def _fsync_directory(self, dirpath: str) -> None:
        # Not supported everywhere (e.g. Windows); the rename already happened
        try:
            dir_fd = os.open(dirpath, os.O_RDONLY)
        except OSError as e:
            logger.warning("directory_fsync_failed", path=dirpath, error=str(e))
            return
        try:
            os.fsync(dir_fd)
        except OSError as e:
            logger.warning("directory_fsync_failed", path=dirpath, error=str(e))
        finally:
            os.close(dir_fd)
