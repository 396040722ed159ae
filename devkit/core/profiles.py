"""
Profile Store.

Named connection profiles (service URL + API key) persisted as a single
JSON document:

    {"profiles": [{"name": "default", "base_url": "...", "api_key": "..."}]}

The store is loaded fresh on every invocation and written back whole by
the login command. There is no cross-process locking: two concurrent
logins race and the last writer wins. Writes go through a temporary file
and an atomic rename, so a reader never sees a half-written file.
"""

import json
import os
import tempfile
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError, model_validator

from devkit.core.exceptions import ProfileFileError, StorageError
from devkit.core.logging import get_logger, log_with_source

logger = get_logger(__name__)

PROFILE_FILE_MODE = 0o600


class Profile(BaseModel):
    """Connection credentials for one service deployment."""

    name: str
    base_url: str
    api_key: str = Field(repr=False)


class ProfileStore(BaseModel):
    """Ordered collection of uniquely named profiles."""

    profiles: list[Profile]

    @model_validator(mode="after")
    def _unique_names(self) -> "ProfileStore":
        seen: set[str] = set()
        for profile in self.profiles:
            if profile.name in seen:
                raise ValueError(f"duplicate profile name '{profile.name}'")
            seen.add(profile.name)
        return self

    @classmethod
    def load(cls, path: Path) -> "ProfileStore":
        """
        Load the store from path.

        A missing file is a normal first run and yields an empty store.

        Raises:
            StorageError: If the file exists but cannot be read
            ProfileFileError: If the file is not a valid profile store
        """
        if not path.exists():
            return cls(profiles=[])

        try:
            raw = path.read_bytes()
        except OSError as e:
            raise StorageError(f"Cannot read profile file {path}: {e}") from e

        try:
            content = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ProfileFileError(f"Invalid profile file {path}: not UTF-8 text ({e.reason})") from e

        try:
            store = cls.model_validate_json(content)
        except ValidationError as e:
            problems = "; ".join(
                f"{'.'.join(str(part) for part in err['loc']) or '<root>'}: {err['msg']}"
                for err in e.errors()
            )
            raise ProfileFileError(f"Invalid profile file {path}: {problems}") from e

        log_with_source(
            logger, "storage", "debug", "Profiles loaded",
            path=str(path), count=len(store.profiles),
        )
        return store

    def save(self, path: Path) -> None:
        """
        Write the whole store to path, creating parent directories.

        Raises:
            StorageError: On any I/O failure
        """
        content = json.dumps(self.model_dump(mode="json"), indent=2)

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    f.write(content)
                os.chmod(tmp_name, PROFILE_FILE_MODE)
                os.replace(tmp_name, path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise StorageError(f"Cannot write profile file {path}: {e}") from e

        log_with_source(
            logger, "storage", "debug", "Profiles saved",
            path=str(path), count=len(self.profiles),
        )

    def upsert_profile(self, profile: Profile) -> None:
        """Replace the profile with the same name in place, or append it."""
        for index, existing in enumerate(self.profiles):
            if existing.name == profile.name:
                self.profiles[index] = profile
                return
        self.profiles.append(profile)

    def get_profile(self, name: str) -> Profile | None:
        """Return the first profile named exactly name, if any."""
        for profile in self.profiles:
            if profile.name == name:
                return profile
        return None
