from pathlib import Path
from typing import Dict, List, Optional

from webring.config.settings import settings
from webring.core.exceptions.exceptions import PictureNotFoundError, PicturesDirectoryNotFoundError
from webring.utils.log import app_logger

PICTURE_EXTENSIONS = {'.jpg', '.jpeg', '.png', '.gif', '.webp', '.svg'}


class PicturesService:
    """Lists and resolves files in the pictures directory.

    Behavior:
    - `list_pictures` only reports image files (by extension, case-insensitive), sorted by name.
    - `resolve` serves any regular file directly inside the directory, the way a static mount would.
    - Names that escape the directory (`..`, absolute paths) and dotfiles resolve to nothing.
    - Only files directly inside the directory are reachable, not nested ones.
    """

    URL_PREFIX = "/pictures"

    def __init__(self, directory: str):
        self.directory = Path(directory)

    def list_pictures(self) -> List[Dict[str, str]]:
        if not self.directory.is_dir():
            app_logger.warning("pictures.dir_missing", directory=str(self.directory))
            raise PicturesDirectoryNotFoundError(str(self.directory))

        pictures = []
        for entry in sorted(self.directory.iterdir(), key=lambda p: p.name):
            if entry.is_file() and not entry.name.startswith('.') and entry.suffix.lower() in PICTURE_EXTENSIONS:
                pictures.append({"filename": entry.name, "url": f"{self.URL_PREFIX}/{entry.name}"})
        return pictures

    def resolve(self, filename: str) -> Path:
        # hidden files are never served
        if not filename or filename.startswith('.') or not self.directory.is_dir():
            raise PictureNotFoundError(filename)

        root = self.directory.resolve()
        candidate = (root / filename).resolve()
        if candidate.parent != root or not candidate.is_file():
            raise PictureNotFoundError(filename)
        return candidate


_pictures_service: Optional[PicturesService] = None


def get_pictures_service() -> PicturesService:
    global _pictures_service
    if _pictures_service is None:
        _pictures_service = PicturesService(settings.PICTURES_DIR)
    return _pictures_service
