import logging
import os
from pathlib import Path, PurePath
from typing import Callable, Optional

from exfs.core.paths import is_within, normalise
from exfs.domain.exceptions import FileNotFoundAboveError, InvalidFileNameError, OutsideHomeError
from exfs.domain.models.common import FileName, FilePath

logger = logging.getLogger(__name__)

PathResolver = Callable[[], "os.PathLike[str]"]
ExistsCheck = Callable[[Path], bool]


def _check_file_name(file_name: str) -> None:
    """Rejects names that would step out of the directory they are joined to."""
    name = PurePath(file_name)
    if not file_name or name.anchor or name.parts in ((), (".",)) or ".." in name.parts:
        raise InvalidFileNameError(file_name)


class UpwardFileLocator:
    """Finds a file in the working directory or one of its ancestors, stopping at home."""

    def __init__(
        self,
        home_resolver: Optional[PathResolver] = None,
        cwd_resolver: Optional[PathResolver] = None,
        exists: Optional[ExistsCheck] = None,
    ):
        """Initializes the UpwardFileLocator.

        Args:
            home_resolver: Returns the user's home directory. Defaults to Path.home.
            cwd_resolver: Returns the current working directory. Defaults to Path.cwd.
            exists: Existence predicate for candidate paths. Defaults to os.path.exists,
                so directories match as well as files.
        """
        self.home_resolver = home_resolver or Path.home
        self.cwd_resolver = cwd_resolver or Path.cwd
        self.exists = exists or os.path.exists

    def locate(self, file_name: FileName) -> FilePath:
        """Searches the working directory and each ancestor up to and including home.

        Nearer directories are always checked first. The process working
        directory is never changed; ascent is pure path computation.

        Args:
            file_name: Name of the file or directory to look for, relative to each searched
                directory. Absolute names and names with ".." segments are rejected.

        Returns:
            The absolute path of the first match.

        Raises:
            InvalidFileNameError: If the name is empty, absolute or contains "..".
            OutsideHomeError: If the working directory is not inside the home directory.
                No existence checks are performed in that case.
            FileNotFoundAboveError: If the search reached home without a match.
            RuntimeError, OSError: If home or the working directory cannot be resolved.
        """
        _check_file_name(file_name)
        home = normalise(self.home_resolver())
        working_dir = normalise(self.cwd_resolver())
        logger.debug(f"Locating '{file_name}' from {working_dir} (boundary: {home})")

        if not is_within(working_dir, home):
            logger.debug(f"Working directory {working_dir} is outside {home}")
            raise OutsideHomeError(str(working_dir), str(home))

        cursor = working_dir
        while True:
            candidate = cursor / file_name
            if not is_within(candidate, home):
                raise InvalidFileNameError(file_name)
            if self.exists(candidate):
                logger.debug(f"Found '{file_name}' at {candidate}")
                return FilePath(str(candidate))
            if cursor == home:
                break
            cursor = cursor.parent
            if not is_within(cursor, home):
                break

        raise FileNotFoundAboveError(file_name, str(home))
