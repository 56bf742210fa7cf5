"""Load input documents from plain text files or archives."""
from pathlib import Path
import tarfile
import tempfile
from typing import List
import zipfile

import py7zr
from pydantic import BaseModel, ConfigDict, Field, FilePath

from arithmetic_text_processor.common.logger import logger


class DocumentReader(BaseModel):
    """
    Read the document to process.

    The reader:
    - reads plain text files directly
    - extracts the first .txt member of a .zip, .tar.xz or .7z archive
    """

    model_config = ConfigDict(frozen=True)

    encoding: str = Field(default="utf-8", description="Text encoding of the document")

    def read(self, input_file: FilePath) -> str:
        """
        Return the text of a document or of the first .txt file inside an archive.

        :param FilePath input_file: Path to the text file or archive

        :return: Document content
        :rtype: str
        :raises ValueError: If the archive contains no .txt file
        :raises OSError: If the file cannot be read
        """
        input_file = Path(input_file)
        if self._is_archive(input_file):
            logger.info("📦 Extracting document from %s", input_file)
            return self._extract_archive(input_file)
        logger.info("📄 Reading document %s", input_file)
        return input_file.read_text(encoding=self.encoding)

    @staticmethod
    def _is_archive(path: Path) -> bool:
        return path.suffix in (".zip", ".7z") or path.suffixes[-2:] == [".tar", ".xz"]

    @staticmethod
    def _first_text_member(names: List[str], archive_format: str) -> str:
        """
        Pick the document inside an archive: the first member ending in .txt.

        :param List[str] names: Member names in archive order
        :param str archive_format: Format name used in the error message

        :return: Name of the document member
        :rtype: str
        :raises ValueError: If the archive holds no .txt member
        """
        for name in names:
            if name.endswith(".txt"):
                return name
        raise ValueError(f"📄❌ No .txt file found in {archive_format} archive")

    def _extract_archive(self, archive_path: FilePath) -> str:
        """
        Extract the document of a .zip, .tar.xz or .7z archive and return its content.

        :param FilePath archive_path: Path to the archive file

        :return: Content of the first .txt member
        :rtype: str
        :raises ValueError: If no .txt file is found or format is unsupported
        """
        archive_path = Path(archive_path)
        # Extract into a temporary directory, nothing is left next to the archive
        with tempfile.TemporaryDirectory() as tmpdir:
            tmpdir_path = Path(tmpdir)
            if archive_path.suffix == ".zip":
                with zipfile.ZipFile(archive_path, "r") as zf:
                    member = self._first_text_member(zf.namelist(), "zip")
                    zf.extract(member, path=tmpdir_path)

            elif archive_path.suffixes[-2:] == [".tar", ".xz"]:
                with tarfile.open(archive_path, "r:xz") as tf:
                    files = [m.name for m in tf.getmembers() if m.isfile()]
                    member = self._first_text_member(files, "tar.xz")
                    tf.extract(member, path=tmpdir_path, filter="data")

            elif archive_path.suffix == ".7z":
                with py7zr.SevenZipFile(archive_path, mode="r") as archive:
                    member = self._first_text_member(archive.getnames(), "7z")
                    archive.extract(targets=[member], path=tmpdir_path)

            else:
                raise ValueError(f"📄❌ Unsupported archive format: {archive_path.suffix}")

            return (tmpdir_path / member).read_text(encoding=self.encoding)
