# sasa

A small audio spectrum analysis library. It takes interleaved audio samples and
mixes them down to mono. It runs a Hann-windowed FFT over overlapping blocks.
It averages the magnitudes into logarithmically spaced frequency bins and scales
them onto a 0–1 decibel range. It can render the result as a text bar display
for a terminal.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Configuration

`sasa.config.SpectrumConfig` is a frozen dataclass that holds every setting.
The defaults are:

| Field               | Default  | Meaning                                  |
|---------------------|----------|------------------------------------------|
| `sample_rate`       | 44100    | Samples per second                       |
| `frames_per_buffer` | 1024     | Frames per capture buffer                |
| `num_channels`      | 2        | Interleaved channels in the input        |
| `device_index`      | -1       | Capture device (-1 for the default)      |
| `fft_size`          | 2048     | FFT length                               |
| `overlap_factor`    | 2        | Blocks overlap by `1 - 1/overlap_factor` |
| `num_bins`          | 64       | Frequency bins shown                     |
| `min_freq`          | 20.0     | Lowest frequency in Hz                   |
| `max_freq`          | 20000.0  | Highest frequency in Hz                  |
| `spectrum_height`   | 20       | Rows in the bar display                  |

Construction raises `ValueError` in these cases:

- a numeric setting other than `device_index` is not positive
- `fft_size` is below 2
- `overlap_factor` exceeds `fft_size`
- `max_freq` is not greater than `min_freq`

The property `SpectrumConfig.hop_size` gives the number of samples between
successive FFT blocks (`fft_size // overlap_factor`).
`SpectrumConfig.bin_edges()` returns a tuple of `(low, high)` frequency pairs,
one for each logarithmic bin.

## Usage

```python
import numpy as np

from sasa.config import SpectrumConfig
from sasa.analyzer import SpectrumAnalyzer
from sasa.display import render_spectrum

config = SpectrumConfig(num_channels=1)
analyzer = SpectrumAnalyzer(config)

t = np.arange(8192) / config.sample_rate
tone = np.sin(2 * np.pi * 1000 * t)

for spectrum in analyzer.feed(tone):
    if analyzer.should_display():
        print(render_spectrum(spectrum, config))
```

`SpectrumAnalyzer.feed(samples)` is a generator. It mixes the interleaved
samples to mono and yields a normalised spectrum each time an FFT block fills.
After each block it keeps the overlapping tail for the next one.
`SpectrumAnalyzer.should_display()` is true on every third block. While a
spectrum is being yielded it refers to that block. The counter advances when
iteration resumes.

`SpectrumAnalyzer.compute_spectrum()` returns the spectrum of the current
analysis window. The analyzer also keeps the latest spectrum in its `spectrum`
attribute and the number of completed blocks in `frame_count`.
`SpectrumAnalyzer.update_config(config)` replaces the settings and resets the
buffers and the counter.

The analysis steps are available on their own in `sasa.analyzer`:

- `hann_window(size)` returns a symmetric Hann window. It raises `ValueError`
  if `size` is below 2.
- `mix_to_mono(samples, channels)` averages interleaved channels. It raises
  `ValueError` if the sample count does not divide evenly into the channels.
- `magnitude_spectrum(block)` returns the magnitudes of the real FFT of a
  Hann-windowed block.
- `map_to_log_bins(magnitudes, config)` averages `fft_size // 2 + 1`
  magnitudes into the configured bins. It raises `ValueError` on a wrong length.
- `normalize_db(bins)` expresses levels in dB relative to the peak and clamps
  them at 0 dB. It then maps them onto the -96..0 dB range as values in 0..1.

The display helpers are in `sasa.display`:

- `frequency_label(freq)` gives whole hertz below 1 kHz and whole kilohertz
  above, for example `"440Hz"` or `"2kHz"`.
- `frequency_markers(config)` gives the line of frequency labels.
- `spectrum_rows(spectrum, height)` gives the bar rows, top first, one column
  per bin.
- `db_scale()` gives the decibel scale line from -96 dB to 0 dB.
- `render_spectrum(spectrum, config)` gives a whole screen of text, starting
  with an ANSI clear-screen code.

## What it does not do

The package does not capture audio from a sound card and does not list audio
devices. `device_index` and `frames_per_buffer` are stored in the configuration
but not used by the analysis. There is no command-line program. You supply the
samples yourself, for example from a sound library, a file or a generated
signal, and print the rendered text where you want it.