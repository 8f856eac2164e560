# runtime/registries.py
from collections.abc import Callable

from traj_sim.app.protocols import PathSampler
from traj_sim.config.models import SamplerCumulativeModel, SamplerLinearScanModel, SamplerUnion
from traj_sim.domain.sampling.samplers import CumulativeLengthSampler, LinearScanSampler

SamplerFactory = Callable[[SamplerUnion], PathSampler]

_sampler_registry: dict[str, SamplerFactory] = {}


# ------------------- Sampler registries ---------------------------


def register_sampler(kind: str):
    def deco(fn: SamplerFactory):
        _sampler_registry[kind] = fn
        return fn

    return deco


def make_sampler(cfg: SamplerUnion) -> PathSampler:
    try:
        factory = _sampler_registry[cfg.kind]
    except KeyError:
        raise ValueError(f"Unknown sampler kind {cfg.kind!r}") from None
    return factory(cfg)


@register_sampler("linear_scan")
def _make_linear_scan(cfg: SamplerLinearScanModel) -> PathSampler:
    return LinearScanSampler()


@register_sampler("cumulative")
def _make_cumulative(cfg: SamplerCumulativeModel) -> PathSampler:
    return CumulativeLengthSampler()
