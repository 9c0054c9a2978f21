import json
from pathlib import Path

from densityplot.cli.exitcodes import EXIT_OK
from densityplot.core.config import PlotConfig, load_config
from densityplot.estimation.density import HistogramDensityEstimator
from densityplot.io.samples import load_samples
from densityplot.report import DistributionPlotter


def _resolve_config(config: str | None, **overrides: object) -> PlotConfig:
    base = load_config(Path(config)) if config else PlotConfig()
    return base.with_overrides(**overrides)


def run(
    *,
    path: str,
    title: str | None = None,
    widen: int | None = None,
    bins: int | None = None,
    height: int | None = None,
    width: int | None = None,
    offset: int | None = None,
    config: str | None = None,
) -> int:
    """
    Plot the estimated density of the samples in `path`.

    Args:
        path: Sample file, or "-" for stdin
        title: Chart title (default from config)
        widen: Horizontal widening factor
        bins: Bin count for continuous data
        height: Chart rows
        width: Resample the plotted curve to this many points
        offset: Left x-label offset in columns
        config: YAML/JSON config file; flags override its values
    """
    cfg = _resolve_config(
        config,
        title=title,
        widen_factor=widen,
        height=height,
        width=width,
        x_label_offset=offset,
    )
    samples = load_samples(path)

    DistributionPlotter(config=cfg).log_distribution_plot(samples, num_bins=bins)
    return EXIT_OK


def estimate(
    *,
    path: str,
    bins: int | None = None,
    config: str | None = None,
) -> int:
    """Print the density estimation of the samples in `path` as JSON."""
    cfg = _resolve_config(config)
    samples = load_samples(path)

    estimator = HistogramDensityEstimator(default_bins=cfg.default_bins, smoothing_window=cfg.smoothing_window)
    result = estimator.estimate(samples, bins)

    print(json.dumps(result.to_dict(), indent=2))
    return EXIT_OK
