"""Configuration for audio capture, FFT analysis and spectrum display."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SpectrumConfig:
    """Parameters for capturing audio, running the FFT and drawing the spectrum."""

    # Audio capture
    sample_rate: int = 44100
    frames_per_buffer: int = 1024
    num_channels: int = 2
    device_index: int = -1  # -1 selects the default device

    # FFT
    fft_size: int = 2048
    overlap_factor: int = 2  # 50% overlap

    # Display
    num_bins: int = 64
    min_freq: float = 20.0
    max_freq: float = 20000.0
    spectrum_height: int = 20

    def __post_init__(self) -> None:
        positive = {
            "sample_rate": self.sample_rate,
            "frames_per_buffer": self.frames_per_buffer,
            "num_channels": self.num_channels,
            "fft_size": self.fft_size,
            "overlap_factor": self.overlap_factor,
            "num_bins": self.num_bins,
            "min_freq": self.min_freq,
            "max_freq": self.max_freq,
            "spectrum_height": self.spectrum_height,
        }
        for name, value in positive.items():
            if value <= 0:
                raise ValueError(f"{name} must be positive, got {value!r}")
        if self.fft_size < 2:
            raise ValueError("fft_size must be at least 2")
        if self.overlap_factor > self.fft_size:
            raise ValueError("overlap_factor must not exceed fft_size")
        if self.max_freq <= self.min_freq:
            raise ValueError("max_freq must be greater than min_freq")

    @property
    def hop_size(self) -> int:
        """Number of samples the analysis window advances between FFTs."""
        return self.fft_size // self.overlap_factor

    def bin_edges(self) -> tuple[tuple[float, float], ...]:
        """Logarithmically spaced (low, high) frequency bounds of each display bin."""
        ratio = (self.max_freq / self.min_freq) ** (1.0 / self.num_bins)
        return tuple(
            (self.min_freq * ratio**i, self.min_freq * ratio ** (i + 1))
            for i in range(self.num_bins)
        )