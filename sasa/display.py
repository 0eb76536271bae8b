"""Text rendering of a normalised spectrum for a terminal."""

from __future__ import annotations

from collections.abc import Sequence

from .config import SpectrumConfig

CLEAR_SCREEN = "\033[2J\033[H"
BAR = "█"


def frequency_label(freq: float) -> str:
    """Short label for a frequency: whole hertz below 1 kHz, whole kilohertz above."""
    if freq < 1000:
        return f"{int(freq)}Hz"
    return f"{int(freq / 1000)}kHz"


def frequency_markers(config: SpectrumConfig) -> str:
    """Line of frequency labels placed across the display."""
    step = max(1, config.num_bins // 8)
    span = config.max_freq / config.min_freq
    parts = []
    for i in range(0, config.num_bins, step):
        freq = config.min_freq * span ** (i / config.num_bins)
        position = i * 80 // config.num_bins
        parts.append(frequency_label(freq).rjust(position) + " ")
    return "".join(parts)


def spectrum_rows(spectrum: Sequence[float], height: int) -> list[str]:
    """Bar-graph rows, top first, with one column per spectrum bin."""
    rows = []
    for y in range(height):
        level = 1.0 - y / height
        rows.append("".join(BAR if value >= level else " " for value in spectrum))
    return rows


def db_scale() -> str:
    """Decibel scale line shown beneath the bars."""
    marks = "".join(f"{db:>8}dB " for db in range(-84, 0, 12))
    return "-96dB " + marks + " 0dB"


def render_spectrum(spectrum: Sequence[float], config: SpectrumConfig) -> str:
    """Full screen of text for one spectrum frame, starting with a clear-screen code."""
    lines = [
        f"Spectrum Analyzer - {config.sample_rate} Hz Sample Rate, "
        f"FFT Size: {config.fft_size}",
        "Press Ctrl+C to exit",
        "",
        frequency_markers(config),
        *spectrum_rows(spectrum, config.spectrum_height),
        db_scale(),
    ]
    return CLEAR_SCREEN + "\n".join(lines) + "\n"