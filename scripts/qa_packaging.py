#!/usr/bin/env python3
"""Packaging QA automation for ogcdef.

This script performs packaging quality assurance checks:
1. Build wheel + sdist artifacts
2. Validate metadata and README rendering with twine check --strict
3. Install from wheel and from sdist in clean venvs + smoke tests
4. Run CLI functional smoke tests against the sample identifier file

Exit code: 0 if all checks pass, 1 if any check fails.

Usage:
    python scripts/qa_packaging.py
"""

import json
import shutil
import subprocess
import sys
import tempfile
from pathlib import Path
from typing import NoReturn


def run_command(
    cmd: list[str],
    cwd: Path | None = None,
    check: bool = True,
    capture_output: bool = False,
) -> subprocess.CompletedProcess[str]:
    """Run a command and handle errors.

    Parameters
    ----------
    cmd : list[str]
        Command and arguments to run.
    cwd : Path | None, optional
        Working directory for command, by default None.
    check : bool, optional
        Raise exception on non-zero exit, by default True.
    capture_output : bool, optional
        Capture stdout/stderr, by default False.

    Returns
    -------
    subprocess.CompletedProcess[str]
        Result of command execution.
    """
    print(f"→ Running: {' '.join(cmd)}")
    return subprocess.run(
        cmd,
        cwd=cwd,
        check=check,
        text=True,
        capture_output=capture_output,
    )


def fail(message: str) -> NoReturn:
    """Print error message and exit with code 1."""
    print(f"\n❌ FAILED: {message}", file=sys.stderr)
    sys.exit(1)


def section(title: str) -> None:
    """Print section header."""
    print(f"\n{'=' * 70}")
    print(f"  {title}")
    print(f"{'=' * 70}\n")


def venv_executables(venv_path: Path) -> tuple[Path, Path]:
    """Return (python, ogcdef) executables of a venv."""
    if sys.platform == "win32":
        return venv_path / "Scripts" / "python.exe", venv_path / "Scripts" / "ogcdef.exe"
    return venv_path / "bin" / "python", venv_path / "bin" / "ogcdef"


def create_venv(venv_path: Path, artifact: Path) -> tuple[Path, Path]:
    """Create a clean venv and install ``artifact`` into it."""
    print(f"Creating clean venv at {venv_path}")
    run_command([sys.executable, "-m", "venv", str(venv_path)])

    python_exe, ogcdef_exe = venv_executables(venv_path)
    run_command([str(python_exe), "-m", "pip", "install", "--upgrade", "pip"])
    run_command([str(python_exe), "-m", "pip", "install", str(artifact)])
    return python_exe, ogcdef_exe


def check_build_artifacts(repo_root: Path) -> tuple[Path, Path]:
    """Build and validate wheel + sdist artifacts.

    Parameters
    ----------
    repo_root : Path
        Root directory of the repository.

    Returns
    -------
    tuple[Path, Path]
        Paths to wheel and sdist files.
    """
    section("A) Build Artifacts (wheel + sdist)")

    dist_dir = repo_root / "dist"
    build_dir = repo_root / "build"

    for directory in [dist_dir, build_dir]:
        if directory.exists():
            print(f"Cleaning {directory}")
            shutil.rmtree(directory)

    run_command([sys.executable, "-m", "build", "--sdist", "--wheel"], cwd=repo_root)

    if not dist_dir.exists():
        fail("dist/ directory not created")

    wheels = list(dist_dir.glob("*.whl"))
    sdists = list(dist_dir.glob("*.tar.gz"))

    if not wheels:
        fail("No wheel (.whl) file found in dist/")

    if not sdists:
        fail("No sdist (.tar.gz) file found in dist/")

    print(f"✓ Wheel created: {wheels[0].name}")
    print(f"✓ Sdist created: {sdists[0].name}")

    return wheels[0], sdists[0]


def check_metadata_and_readme(repo_root: Path) -> None:
    """Validate metadata and README rendering with twine."""
    section("B) Metadata + README Rendering (twine check)")

    dist_files = [str(p) for p in (repo_root / "dist").iterdir()]
    result = run_command(
        [sys.executable, "-m", "twine", "check", "--strict", *dist_files],
        cwd=repo_root,
        check=False,
        capture_output=True,
    )

    print(result.stdout)
    if result.stderr:
        print(result.stderr, file=sys.stderr)

    if result.returncode != 0:
        fail("twine check --strict reported warnings or errors")
    print("✓ All metadata and README checks passed (0 warnings, 0 errors)")


def test_install(artifact: Path, label: str) -> None:
    """Test installation of ``artifact`` in a clean venv.

    Parameters
    ----------
    artifact : Path
        Wheel or sdist to install.
    label : str
        Artifact kind, used in messages.
    """
    section(f"Install Test ({label})")

    with tempfile.TemporaryDirectory(prefix=f"venv_pkg_{label}_") as tmpdir:
        python_exe, ogcdef_exe = create_venv(Path(tmpdir), artifact)

        result = run_command(
            [
                str(python_exe),
                "-c",
                "import ogcdef; print(ogcdef.code_of('crs', 'EPSG', 'EPSG:4326'))",
            ],
            capture_output=True,
        )
        if result.stdout.strip() != "4326":
            fail(f"Failed to import ogcdef from {label}")
        print("✓ Import test passed")

        result = run_command(
            [
                str(python_exe),
                "-c",
                "import importlib.metadata as m; print(m.version('ogcdef'))",
            ],
            capture_output=True,
        )
        print(f"✓ Version check passed: {result.stdout.strip()}")

        run_command([str(ogcdef_exe), "--help"], capture_output=True)
        print("✓ CLI --help passed")

        result = run_command([str(ogcdef_exe), "--version"], capture_output=True)
        print(f"✓ CLI --version passed: {result.stdout.strip()}")

        print(f"\n✓ All {label} install tests passed")


def test_cli_functional(repo_root: Path, wheel_path: Path) -> None:
    """Run CLI functional smoke test with the sample identifier file."""
    section("E) CLI Functional Smoke Test")

    with tempfile.TemporaryDirectory(prefix="venv_cli_test_") as tmpdir:
        _, ogcdef_exe = create_venv(Path(tmpdir) / "venv", wheel_path)

        result = run_command(
            [str(ogcdef_exe), "parse", "urn:ogc:def:crs:EPSG:8.2:4326", "--json"],
            capture_output=True,
        )
        if json.loads(result.stdout)["version"] != "8.2":
            fail("ogcdef parse returned an unexpected version")
        print("✓ CLI parse command succeeded")

        result = run_command(
            [str(ogcdef_exe), "parse", "not:a:urn"],
            check=False,
            capture_output=True,
        )
        if result.returncode != 3:
            fail(f"ogcdef parse exited with {result.returncode} for an unrecognized identifier")
        print("✓ CLI no-match exit status is 3")

        fixture_path = repo_root / "tests" / "fixtures" / "identifiers.txt"
        output_path = Path(tmpdir) / "output" / "parsed.jsonl"
        run_command([str(ogcdef_exe), "batch", str(fixture_path), "--output", str(output_path)])

        if not output_path.exists():
            fail(f"Expected output file not created: {output_path}")

        content = output_path.read_text(encoding="utf-8")
        if not content.strip():
            fail("Output file is empty")

        print("✓ CLI batch command succeeded")
        print(f"✓ Output has {len(content.splitlines())} lines")

        print("\n✓ All CLI functional tests passed")


def main() -> None:
    """Run all packaging QA checks."""
    repo_root = Path(__file__).parent.parent.resolve()

    print("=" * 70)
    print("  PACKAGING QA - ogcdef")
    print("=" * 70)
    print(f"\nRepository root: {repo_root}\n")

    try:
        wheel_path, sdist_path = check_build_artifacts(repo_root)
        check_metadata_and_readme(repo_root)
        test_install(wheel_path, "wheel")
        test_install(sdist_path, "sdist")
        test_cli_functional(repo_root, wheel_path)

        print("\n" + "=" * 70)
        print("  ✅ ALL PACKAGING QA CHECKS PASSED")
        print("=" * 70)
        sys.exit(0)

    except subprocess.CalledProcessError as e:
        fail(f"Command failed with exit code {e.returncode}: {' '.join(e.cmd)}")
    except KeyboardInterrupt:
        print("\n\n⚠️  Interrupted by user")
        sys.exit(1)
    except Exception as e:
        fail(f"Unexpected error: {e}")


if __name__ == "__main__":
    main()
