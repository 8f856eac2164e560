# traj_sim/app/build.py
from collections.abc import Mapping
from dataclasses import dataclass

from traj_sim.app.follower import TrajectoryFollower
from traj_sim.app.protocols import PathSampler, RenderSink
from traj_sim.app.render import MemoryRenderSink, RectTransform, Stroke
from traj_sim.config.models import ScenarioModel
from traj_sim.domain.entities.geography import Rect
from traj_sim.io.follower_logging import FollowerLogging  # JSON logs
from traj_sim.io.recorder import Recorder, Sink
from traj_sim.runtime.registries import make_sampler
from traj_sim.sim.clock import FrameClock
from traj_sim.sim.hooks import NoopHooks


@dataclass
class App:
    follower: TrajectoryFollower
    clock: FrameClock
    sampler: PathSampler
    transform: RectTransform
    sink: RenderSink
    recorder: Recorder | None


def build(
    cfg: ScenarioModel | Mapping | None = None,
    *,
    use_logging: bool = True,
    sink: RenderSink | None = None,
    record_to: tuple[Sink, ...] = (),
) -> App:
    # 0) Validate config
    if cfg is None:
        model = ScenarioModel()
    else:
        model = cfg if isinstance(cfg, ScenarioModel) else ScenarioModel.model_validate(cfg)

    # 1) Clock & sampler
    clock = FrameClock(rate=model.clock.rate, start_t=model.clock.start_t)
    sampler = make_sampler(model.sampler)

    # 2) Canvas -> screen
    screen = Rect.from_min_size(
        (model.canvas.x, model.canvas.y), (model.canvas.width, model.canvas.height)
    )
    transform = RectTransform.canvas_for(screen)

    # 3) Hooks, render sink and recorder
    hooks = (
        FollowerLogging(
            run_id=model.run_id,
            level=model.log.level,
            debug=model.log.debug,
            sample_every=model.log.sample_every,
        )
        if use_logging
        else NoopHooks()
    )
    sink = sink if sink is not None else MemoryRenderSink()
    recorder = Recorder(*record_to) if record_to else None

    # 4) Follower
    r = model.render
    follower = TrajectoryFollower(
        sampler=sampler,
        clock=clock,
        transform=transform,
        hooks=hooks,
        sink=sink,
        recorder=recorder,
        heading_step=model.follower.heading_step,
        marker_radius=model.follower.marker_radius,
        indicator_length=model.follower.indicator_length,
        path_stroke=Stroke(r.path_stroke.width, r.path_stroke.color),
        indicator_stroke=Stroke(r.indicator_stroke.width, r.indicator_stroke.color),
        marker_color=r.marker_color,
    )

    return App(follower, clock, sampler, transform, sink, recorder)
