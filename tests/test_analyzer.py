import numpy as np
import pytest

from sasa.analyzer import (
    SpectrumAnalyzer,
    hann_window,
    magnitude_spectrum,
    map_to_log_bins,
    mix_to_mono,
    normalize_db,
)
from sasa.config import SpectrumConfig


@pytest.fixture
def small_config():
    return SpectrumConfig(
        sample_rate=8000,
        frames_per_buffer=64,
        num_channels=2,
        fft_size=256,
        overlap_factor=2,
        num_bins=16,
        min_freq=20.0,
        max_freq=4000.0,
    )


def test_hann_window_endpoints_and_symmetry():
    w = hann_window(64)
    assert w[0] == pytest.approx(0.0)
    assert w[-1] == pytest.approx(0.0)
    assert np.allclose(w, w[::-1])
    assert w.max() <= 1.0


def test_hann_window_matches_numpy_hanning():
    assert np.allclose(hann_window(33), np.hanning(33))


def test_hann_window_rejects_tiny_size():
    with pytest.raises(ValueError):
        hann_window(1)


def test_mix_to_mono_averages_channels():
    assert np.allclose(mix_to_mono([1.0, 3.0, 2.0, 4.0], 2), [2.0, 3.0])


def test_mix_to_mono_single_channel_is_identity():
    data = [0.1, -0.2, 0.3]
    assert np.allclose(mix_to_mono(data, 1), data)


def test_mix_to_mono_rejects_partial_frame():
    with pytest.raises(ValueError):
        mix_to_mono([1.0, 2.0, 3.0], 2)


def test_magnitude_spectrum_length_and_silence():
    mags = magnitude_spectrum(np.zeros(128))
    assert mags.shape == (65,)
    assert np.all(mags == 0.0)


def test_magnitude_spectrum_peaks_at_tone_frequency():
    n = 256
    t = np.arange(n)
    tone = np.sin(2 * np.pi * 32 * t / n)
    mags = magnitude_spectrum(tone)
    assert int(np.argmax(mags)) == 32


def test_map_to_log_bins_constant_magnitudes(small_config):
    mags = np.full(small_config.fft_size // 2 + 1, 2.5)
    bins = map_to_log_bins(mags, small_config)
    assert bins.shape == (small_config.num_bins,)
    assert np.allclose(bins, 2.5)


def test_map_to_log_bins_rejects_wrong_length(small_config):
    with pytest.raises(ValueError):
        map_to_log_bins(np.ones(10), small_config)


def test_normalize_db_stays_in_unit_range():
    out = normalize_db([0.0, 1e-6, 0.5, 3.0])
    assert out.shape == (4,)
    assert np.all((out >= 0.0) & (out <= 1.0))


def test_normalize_db_clamps_relative_levels_at_zero_db():
    out = normalize_db([0.0, 0.01, 1.0])
    assert np.allclose(out, 1.0)


def test_feed_less_than_window_yields_nothing(small_config):
    analyzer = SpectrumAnalyzer(small_config)
    frames = small_config.fft_size - 1
    spectra = list(analyzer.feed(np.zeros(frames * small_config.num_channels)))
    assert spectra == []
    assert analyzer.frame_count == 0


def test_feed_full_window_yields_one_spectrum(small_config):
    analyzer = SpectrumAnalyzer(small_config)
    samples = np.random.default_rng(0).uniform(-1, 1, small_config.fft_size * 2)
    spectra = list(analyzer.feed(samples))
    assert len(spectra) == 1
    assert spectra[0].shape == (small_config.num_bins,)
    assert analyzer.frame_count == 1


def test_feed_overlap_produces_frame_per_hop(small_config):
    analyzer = SpectrumAnalyzer(small_config)
    frames = small_config.fft_size + 3 * small_config.hop_size
    spectra = list(analyzer.feed(np.zeros(frames * small_config.num_channels)))
    assert len(spectra) == 4
    assert analyzer.frame_count == 4


def test_feed_in_chunks_matches_single_feed(small_config):
    rng = np.random.default_rng(1)
    samples = rng.uniform(-1, 1, small_config.fft_size * 2 * 3)
    whole = SpectrumAnalyzer(small_config)
    chunked = SpectrumAnalyzer(small_config)
    expected = list(whole.feed(samples))
    got = []
    for chunk in np.split(samples, 12):
        got.extend(chunked.feed(chunk))
    assert len(got) == len(expected)
    for a, b in zip(got, expected):
        assert np.allclose(a, b)


def test_should_display_every_third_frame(small_config):
    analyzer = SpectrumAnalyzer(small_config)
    frames = small_config.fft_size + 5 * small_config.hop_size
    flags = [
        analyzer.should_display()
        for _ in analyzer.feed(np.zeros(frames * small_config.num_channels))
    ]
    assert flags == [True, False, False, True, False, False]


def test_compute_spectrum_updates_state(small_config):
    analyzer = SpectrumAnalyzer(small_config)
    result = analyzer.compute_spectrum()
    assert np.array_equal(result, analyzer.spectrum)
    assert np.all((result >= 0.0) & (result <= 1.0))


def test_update_config_resets_buffers(small_config):
    analyzer = SpectrumAnalyzer(small_config)
    list(analyzer.feed(np.zeros(small_config.fft_size * 2)))
    new_config = SpectrumConfig(
        sample_rate=8000, num_channels=1, fft_size=128, num_bins=8, max_freq=4000.0
    )
    analyzer.update_config(new_config)
    assert analyzer.frame_count == 0
    assert analyzer.spectrum.shape == (8,)
    spectra = list(analyzer.feed(np.zeros(128)))
    assert len(spectra) == 1
    assert spectra[0].shape == (8,)


def test_feed_rejects_partial_frame(small_config):
    analyzer = SpectrumAnalyzer(small_config)
    with pytest.raises(ValueError):
        list(analyzer.feed([0.0, 0.0, 0.0]))