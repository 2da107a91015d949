"""Main orchestration script for generating rustdoc JSON and Docusaurus docs."""

import argparse
import subprocess
import sys
from collections.abc import Sequence
from pathlib import Path


def run_command(cmd_list: Sequence[str | Path], cwd: Path | str | None = None) -> None:
    """Run a command and exit if it fails."""
    cmd_str = " ".join(str(x) for x in cmd_list)
    print(f"Running: {cmd_str}")
    try:
        subprocess.run(cmd_list, check=True, cwd=cwd)
    except subprocess.CalledProcessError as e:
        print(f"Error executing command: {cmd_str}")
        sys.exit(e.returncode)


def rustdoc_json_path(target_dir: Path, crate: str) -> Path:
    """Return where rustdoc writes the JSON for a crate."""
    return target_dir / "doc" / f"{crate.replace('-', '_')}.json"


def main() -> None:
    """Run the full documentation generation pipeline."""
    parser = argparse.ArgumentParser(
        description="Generate rustdoc JSON and Docusaurus documentation."
    )
    parser.add_argument(
        "crates",
        help="Comma-separated cargo packages to document (converted in order)",
    )
    parser.add_argument(
        "--manifest-dir",
        type=Path,
        default=Path.cwd(),
        help="Directory of the Cargo workspace (default: current directory)",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Output directory (default: <manifest-dir>/target/doc-md)",
    )
    parser.add_argument(
        "--base-path",
        default=None,
        help="Route prefix of the generated docs in the site",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Resolve everything without writing files",
    )
    parser.add_argument(
        "--config",
        help="Path to configuration file",
    )
    args = parser.parse_args()

    crates = [c.strip() for c in args.crates.split(",") if c.strip()]
    if not crates:
        parser.error("at least one crate is required")
    target_dir = args.manifest_dir / "target"
    out_dir = args.output or target_dir / "doc-md"

    # 1. Generate rustdoc JSON (requires a nightly toolchain)
    print("--- Step 1: Generating rustdoc JSON ---")
    for crate in crates:
        run_command(
            [
                "cargo",
                "+nightly",
                "rustdoc",
                "-p",
                crate,
                "--lib",
                "--",
                "-Z",
                "unstable-options",
                "--output-format",
                "json",
            ],
            cwd=args.manifest_dir,
        )

    # 2. Convert each crate; sidebars accumulate in the shared output
    print("\n--- Step 2: Converting rustdoc JSON to Docusaurus Markdown ---")
    python_exe = sys.executable

    for crate in crates:
        cmd = [
            python_exe,
            "-m",
            "rustdoc_docusaurus.convert_rustdoc_json",
            str(rustdoc_json_path(target_dir, crate)),
            "--output",
            str(out_dir),
            "--workspace-crates",
            ",".join(crates),
        ]
        if args.base_path is not None:
            cmd.extend(["--base-path", args.base_path])
        if args.dry_run:
            cmd.append("--dry-run")
        if args.config:
            cmd.extend(["--config", args.config])

        run_command(cmd)

    print(f"\nSUCCESS: Documentation generated in {out_dir}")


if __name__ == "__main__":
    main()
