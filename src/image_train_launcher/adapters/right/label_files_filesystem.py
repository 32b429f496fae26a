from __future__ import annotations

import shutil
from pathlib import Path

from image_train_launcher.core.ports.label_file_store import LabelFileStorePort


class FilesystemLabelFileStore(LabelFileStorePort):
    """Copies the label file into the trainer's folder.

    With `normalize_line_endings` the file is rewritten line by line with
    `\\n` endings (CRLF and bare CR are stripped); otherwise it is a byte copy.
    Missing source or destination folders raise the underlying OSError.
    """

    def copy(self, *, source: Path, dest_dir: Path, dest_name: str, normalize_line_endings: bool) -> Path:
        dest = Path(dest_dir) / dest_name
        if not normalize_line_endings:
            shutil.copyfile(source, dest)
            return dest

        data = Path(source).read_bytes()
        with open(dest, "wb") as out:
            for line in data.splitlines():
                out.write(line)
                out.write(b"\n")
        return dest
