"""
Minimal Chromium for serverless sandboxes.

The pack is a plain tar published per Chromium release. It holds a
brotli-compressed browser binary (``chromium.br``) and brotli-compressed tar
archives with the shared libraries, fonts and software GL the binary needs
(``al2023.tar.br``, ``fonts.tar.br``, ``swiftshader.tar.br``). Everything is
unpacked into a writable scratch directory, usually ``/tmp``.
"""

import io
import os
import tarfile
import tempfile
from pathlib import Path

import brotli
import requests

from pagepdf.shared.errors import ChromiumPackError
from pagepdf.shared.logging import get_logger

logger = get_logger(__name__)

EXECUTABLE_NAME = "chromium"
CHUNK_SIZE = 1024 * 1024


class ChromiumPack:
    """Resolve the minimal Chromium executable, downloading it on first use."""

    def __init__(self, pack_url: str, target_dir: Path, timeout: float = 120.0):
        self.pack_url = pack_url
        self.target_dir = Path(target_dir)
        self.timeout = timeout

    @property
    def executable(self) -> Path:
        return self.target_dir / EXECUTABLE_NAME

    def executable_path(self) -> Path:
        """
        Return the path of a runnable Chromium binary.

        An already inflated binary is reused as-is. Otherwise the pack is
        downloaded and unpacked into ``target_dir``.

        Raises:
            ChromiumPackError: download or unpacking failed
        """
        if self.executable.exists():
            logger.debug(f"Reusing Chromium at {self.executable}")
            return self.executable

        self.target_dir.mkdir(parents=True, exist_ok=True)
        logger.info(f"Fetching Chromium pack from {self.pack_url}")

        with tempfile.TemporaryDirectory(dir=self.target_dir) as scratch:
            scratch_dir = Path(scratch)
            archive = self._download(scratch_dir / "pack.tar")
            pack_dir = scratch_dir / "pack"
            self._extract(archive, pack_dir)
            self._inflate(pack_dir)

        if not self.executable.exists():
            raise ChromiumPackError(
                f"Chromium pack did not contain {EXECUTABLE_NAME}.br",
                details={"pack_url": self.pack_url},
            )

        logger.info(f"Chromium ready at {self.executable}")
        return self.executable

    def launch_env(self) -> dict[str, str]:
        """Environment for the browser process, pointing it at the unpacked libraries."""
        env = dict(os.environ)

        lib_dir = self.target_dir / "al2023" / "lib"
        if lib_dir.is_dir():
            current = env.get("LD_LIBRARY_PATH")
            env["LD_LIBRARY_PATH"] = f"{lib_dir}:{current}" if current else str(lib_dir)

        fonts_dir = self.target_dir / "fonts"
        if fonts_dir.is_dir():
            env["FONTCONFIG_PATH"] = str(fonts_dir)

        return env

    def _download(self, destination: Path) -> Path:
        try:
            with requests.get(self.pack_url, stream=True, timeout=self.timeout) as response:
                response.raise_for_status()
                with open(destination, "wb") as f:
                    for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
                        if chunk:
                            f.write(chunk)
        except requests.RequestException as e:
            raise ChromiumPackError(
                f"Failed to download Chromium pack: {e}",
                details={"pack_url": self.pack_url},
            ) from e

        logger.info(f"Downloaded Chromium pack: {destination.stat().st_size} bytes")
        return destination

    def _extract(self, archive: Path, destination: Path) -> None:
        try:
            with tarfile.open(archive) as tar:
                tar.extractall(destination, filter="data")
        except tarfile.TarError as e:
            raise ChromiumPackError(f"Corrupt Chromium pack: {e}") from e

    def _inflate(self, pack_dir: Path) -> None:
        members = sorted(pack_dir.rglob("*.br"))
        archives = [m for m in members if m.name.endswith(".tar.br")]
        binaries = [m for m in members if not m.name.endswith(".tar.br")]

        for compressed in archives:
            data = self._decompress(compressed)
            try:
                with tarfile.open(fileobj=io.BytesIO(data)) as tar:
                    tar.extractall(self.target_dir, filter="data")
            except tarfile.TarError as e:
                raise ChromiumPackError(f"Corrupt archive {compressed.name}: {e}") from e

        # Binaries go in last: the executable existing means the whole pack is in place
        staged = []
        for compressed in binaries:
            target = self.target_dir / compressed.name[: -len(".br")]
            partial = target.with_name(f"{target.name}.{os.getpid()}.partial")
            partial.write_bytes(self._decompress(compressed))
            partial.chmod(0o755)
            staged.append((partial, target))

        for partial, target in staged:
            os.replace(partial, target)

    def _decompress(self, compressed: Path) -> bytes:
        try:
            return brotli.decompress(compressed.read_bytes())
        except brotli.error as e:
            raise ChromiumPackError(f"Failed to decompress {compressed.name}: {e}") from e
