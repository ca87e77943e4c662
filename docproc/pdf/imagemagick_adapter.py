import subprocess
import tempfile
from pathlib import Path

from docproc.logging.logger import Log
from docproc.pdf.base import BaseRasterizer
from docproc.pdf.exceptions import RasterizationError

_OUTPUT_PATTERN = "page_%03d.png"


def _page_number(path: Path) -> int:
    return int(path.stem.rsplit("_", 1)[-1])


class ImageMagickAdapter(BaseRasterizer):
    """Renders PDF pages by invoking the ImageMagick ``convert`` executable.

    Each call works in its own temporary directory, removed on exit whether
    conversion succeeded or not.
    """

    def __init__(self, command: str = "convert", timeout_seconds: int = 120) -> None:
        self._command = command
        self._timeout_seconds = timeout_seconds

    def rasterize(self, pdf_bytes: bytes) -> list[bytes]:
        with tempfile.TemporaryDirectory(prefix="docproc_pdf_") as tmp:
            workdir = Path(tmp)
            source = workdir / "source.pdf"
            source.write_bytes(pdf_bytes)
            self._convert(source, workdir / _OUTPUT_PATTERN)
            pages = sorted(workdir.glob("page_*.png"), key=_page_number)
            Log.debug(f"ImageMagick produced {len(pages)} page images")
            return [page.read_bytes() for page in pages]

    def _convert(self, source: Path, output_pattern: Path) -> None:
        try:
            subprocess.run(
                [self._command, str(source), str(output_pattern)],
                check=True,
                capture_output=True,
                timeout=self._timeout_seconds,
            )
        except FileNotFoundError as exc:
            raise RasterizationError(
                f"Rasterizer executable '{self._command}' not found"
            ) from exc
        except subprocess.TimeoutExpired as exc:
            raise RasterizationError(
                f"Rasterizer timed out after {self._timeout_seconds}s"
            ) from exc
        except subprocess.CalledProcessError as exc:
            stderr = (exc.stderr or b"").decode("utf-8", errors="replace").strip()
            raise RasterizationError(
                f"Rasterizer exited with code {exc.returncode}: {stderr}"
            ) from exc
