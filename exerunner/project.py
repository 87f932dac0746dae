"""Generation of rust-project.json so rust-analyzer understands exercises."""

from __future__ import annotations

import json
import os
import subprocess
from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class Crate:
    """One crate entry in rust-project.json."""

    root_module: str
    edition: str = "2021"
    deps: list[str] = field(default_factory=list)
    # Lets rust-analyzer work inside #[test] blocks.
    cfg: list[str] = field(default_factory=lambda: ["test"])

    def to_dict(self) -> dict:
        return {
            "root_module": self.root_module,
            "edition": self.edition,
            "deps": list(self.deps),
            "cfg": list(self.cfg),
        }


@dataclass
class RustAnalyzerProject:
    """Contents of rust-project.json."""

    sysroot_src: str = ""
    crates: list[Crate] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "sysroot_src": self.sysroot_src,
            "crates": [crate.to_dict() for crate in self.crates],
        }

    def write_to_disk(self, path: str | os.PathLike = "./rust-project.json") -> None:
        """Write the project as compact JSON."""
        Path(path).write_text(
            json.dumps(self.to_dict(), separators=(",", ":"), ensure_ascii=False),
            encoding="utf-8",
        )

    def add_path(self, path: str) -> None:
        """Add a crate when the text after the first dot is 'rs'."""
        _, dot, ext = path.partition(".")
        if dot and ext == "rs":
            self.crates.append(Crate(root_module=path))

    def exercises_to_json(self, root: str | os.PathLike = ".") -> None:
        """Add a crate for every .rs file below root/exercises."""
        root = Path(root)
        for entry in sorted((root / "exercises").glob("**/*")):
            self.add_path(entry.relative_to(root).as_posix())

    def get_sysroot_src(self) -> None:
        """Find the standard library sources of the default toolchain."""
        env_path = os.environ.get("RUST_SRC_PATH")
        if env_path is not None:
            self.sysroot_src = env_path
            return

        result = subprocess.run(["rustc", "--print", "sysroot"], capture_output=True)
        output = result.stdout.decode("utf-8", errors="replace")
        parts = output.split()
        toolchain = parts[0] if parts else output

        print(f"Determined toolchain: {toolchain}\n")

        self.sysroot_src = str(
            Path(toolchain, "lib", "rustlib", "src", "rust", "library")
        )