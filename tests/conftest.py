"""Shared pytest fixtures for the reduction pipeline tests."""

from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import pytest  # noqa: E402

N_EPOCHS = 20
JD0 = 2459000.5


def write_photometry(path: Path, mags, err1: float, err2: float) -> Path:
    """Seven-column photometry table: JD, mag, _, std1, err1, std2, err2."""
    lines = []
    for k, m in enumerate(mags):
        jd = JD0 + k
        lines.append(f"{jd:.4f} {m:.3f} 0 {13.0 + 0.01 * k:.3f} {err1:.3f} {14.0 - 0.01 * k:.3f} {err2:.3f}")
    path.write_text("\n".join(lines) + "\n")
    return path


def write_polarization(path: Path, n: int, interleaved: bool = False) -> Path:
    """Object polarization table, or the object/std1/std2 interleaved table.

    P encodes the row identity: object = 10 + k, standard s = s + 0.01 k.
    """
    lines = []
    for k in range(n):
        jd = JD0 + k
        lines.append(f"{jd:.4f} 0 {10.0 + k:.2f}")
        if interleaved:
            lines.append(f"{jd:.4f} 0 {1.0 + 0.01 * k:.2f}")
            lines.append(f"{jd:.4f} 0 {2.0 + 0.01 * k:.2f}")
    path.write_text("\n".join(lines) + "\n")
    return path


@pytest.fixture
def r_mags():
    return [12.0 + 0.05 * k for k in range(N_EPOCHS)]


@pytest.fixture
def i_mags():
    return [11.5 + 0.04 * k for k in range(N_EPOCHS)]


@pytest.fixture
def materials_dir(tmp_path, r_mags, i_mags):
    """BL Lac input tables; standard 2 has the smaller errors."""
    d = tmp_path / "materials"
    d.mkdir()
    write_photometry(d / "bllacr.dat", r_mags, err1=0.030, err2=0.010)
    write_photometry(d / "bllaci.dat", i_mags, err1=0.020, err2=0.015)
    write_polarization(d / "bllacPPPx", N_EPOCHS)
    write_polarization(d / "bllacPxall", N_EPOCHS, interleaved=True)
    return d
