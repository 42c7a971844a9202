"""Image intake: one file value out of drops, pastes, and file dialogs."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from PyQt6.QtCore import QBuffer, QIODevice, QMimeData, QMimeDatabase
from PyQt6.QtGui import QImage, QPixmap

_CLIPBOARD_NAME = "clipboard.png"
_CLIPBOARD_MIME = "image/png"


@dataclass(slots=True, frozen=True)
class SelectedFile:
    """A user-supplied file candidate with its declared content type.

    Local files carry a *path* and are read lazily; clipboard bitmaps carry
    their encoded bytes in *data*.
    """

    name: str
    mime_type: str
    path: Path | None = None
    data: bytes | None = None

    def read_bytes(self) -> bytes:
        """Return the full file contents. Raises ``OSError`` if unreadable."""
        if self.data is not None:
            return self.data
        if self.path is None:
            raise OSError(f"{self.name} has no content")
        return self.path.read_bytes()


def is_image(file: SelectedFile) -> bool:
    """Accept only declared ``image/*`` content types."""
    return file.mime_type.startswith("image/")


def first_file(files: Sequence[SelectedFile]) -> SelectedFile | None:
    """Pick the first file when one event delivers several."""
    return files[0] if files else None


def selected_file_from_path(path: Path) -> SelectedFile:
    mime = QMimeDatabase().mimeTypeForFile(str(path))
    return SelectedFile(name=path.name, mime_type=mime.name(), path=path)


def selected_file_from_image(image: QImage) -> SelectedFile | None:
    """Encode an in-memory bitmap (e.g. a copied screenshot) as PNG."""
    if image.isNull():
        return None
    buffer = QBuffer()
    buffer.open(QIODevice.OpenModeFlag.WriteOnly)
    ok = image.save(buffer, "PNG")
    data = bytes(buffer.data().data())
    buffer.close()
    if not ok:
        return None
    return SelectedFile(name=_CLIPBOARD_NAME, mime_type=_CLIPBOARD_MIME, data=data)


def files_from_mime_data(mime: QMimeData | None) -> list[SelectedFile]:
    """Collect file candidates from drag-drop or clipboard mime data.

    Local file URLs win; a bare bitmap is used only when no files are listed.
    """
    if mime is None:
        return []

    files = [
        selected_file_from_path(Path(url.toLocalFile()))
        for url in mime.urls()
        if url.isLocalFile()
    ]
    if files:
        return files

    if mime.hasImage():
        image = mime.imageData()
        if isinstance(image, QPixmap):
            image = image.toImage()
        if isinstance(image, QImage):
            file = selected_file_from_image(image)
            if file is not None:
                return [file]
    return []


def preview_pixmap(file: SelectedFile) -> QPixmap:
    """Build a displayable preview; a null pixmap if the bytes don't decode."""
    pixmap = QPixmap()
    if file.data is not None:
        pixmap.loadFromData(file.data)
    elif file.path is not None:
        pixmap.load(str(file.path))
    return pixmap
