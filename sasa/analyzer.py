"""Short-time spectrum analysis with logarithmic frequency bins."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

import numpy as np

from .config import SpectrumConfig

_DB_FLOOR = 96.0
_MIN_PEAK = 1e-10


def hann_window(size: int) -> np.ndarray:
    """Symmetric Hann window of the given length."""
    if size < 2:
        raise ValueError("window size must be at least 2")
    i = np.arange(size)
    return 0.5 * (1.0 - np.cos(2.0 * np.pi * i / (size - 1)))


def mix_to_mono(samples: Sequence[float], channels: int) -> np.ndarray:
    """Average interleaved multi-channel samples into one channel."""
    if channels <= 0:
        raise ValueError("channels must be positive")
    data = np.asarray(samples, dtype=np.float64)
    if data.size % channels:
        raise ValueError(
            f"{data.size} samples do not divide into {channels} channels"
        )
    return data.reshape(-1, channels).mean(axis=1)


def magnitude_spectrum(block: Sequence[float]) -> np.ndarray:
    """Magnitudes of the real FFT of a Hann-windowed block."""
    data = np.asarray(block, dtype=np.float64)
    return np.abs(np.fft.rfft(data * hann_window(data.size)))


def map_to_log_bins(magnitudes: Sequence[float], config: SpectrumConfig) -> np.ndarray:
    """Average FFT magnitudes into the configuration's logarithmic bins."""
    mags = np.asarray(magnitudes, dtype=np.float64)
    half = config.fft_size // 2
    if mags.size != half + 1:
        raise ValueError(f"expected {half + 1} magnitudes, got {mags.size}")

    def to_index(freq: float) -> int:
        index = int(freq * config.fft_size / config.sample_rate)
        return max(1, min(index, half))

    return np.array(
        [
            mags[to_index(low) : to_index(high) + 1].mean()
            for low, high in config.bin_edges()
        ]
    )


def normalize_db(bins: Sequence[float]) -> np.ndarray:
    """Scale bin levels to 0..1 relative to the peak on a 96 dB range.

    Levels are expressed in dB relative to the peak and clamped at 0 dB
    before being mapped onto the -96..0 dB range.
    """
    values = np.asarray(bins, dtype=np.float64)
    peak = max(_MIN_PEAK, float(values.max(initial=_MIN_PEAK)))
    with np.errstate(divide="ignore"):
        db = np.maximum(0.0, 20.0 * np.log10(values / peak))
    return np.clip((db + _DB_FLOOR) / _DB_FLOOR, 0.0, 1.0)


class SpectrumAnalyzer:
    """Accumulates audio into overlapping windows and computes their spectra."""

    def __init__(self, config: SpectrumConfig) -> None:
        self.update_config(config)

    def update_config(self, config: SpectrumConfig) -> None:
        """Switch to a new configuration and start with empty buffers."""
        self.config = config
        self._window = np.zeros(config.fft_size)
        self._position = 0
        self.frame_count = 0
        self.spectrum = np.zeros(config.num_bins)

    def feed(self, samples: Sequence[float]) -> Iterator[np.ndarray]:
        """Add interleaved samples, yielding each spectrum as its window fills.

        While a spectrum is being yielded, ``should_display`` refers to that
        frame; the frame counter advances when iteration resumes.
        """
        mono = mix_to_mono(samples, self.config.num_channels)
        size = self.config.fft_size
        hop = self.config.hop_size
        consumed = 0
        while consumed < mono.size:
            take = min(size - self._position, mono.size - consumed)
            self._window[self._position : self._position + take] = mono[
                consumed : consumed + take
            ]
            self._position += take
            consumed += take
            if self._position >= size:
                yield self.compute_spectrum()
                self._window[: size - hop] = self._window[hop:].copy()
                self._position = size - hop
                self.frame_count += 1

    def compute_spectrum(self) -> np.ndarray:
        """Spectrum of the current analysis window, normalised to 0..1."""
        magnitudes = magnitude_spectrum(self._window)
        self.spectrum = normalize_db(map_to_log_bins(magnitudes, self.config))
        return self.spectrum.copy()

    def should_display(self) -> bool:
        """Whether the current frame is one to draw (every third frame)."""
        return self.frame_count % 3 == 0