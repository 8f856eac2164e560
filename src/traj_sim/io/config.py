# src/traj_sim/io/config.py
import json
import os

from traj_sim.config.models import ScenarioModel


def load_scenario(path: str) -> ScenarioModel:
    path = os.path.expandvars(os.path.expanduser(path))
    with open(path, encoding="utf-8") as fp:
        return ScenarioModel.model_validate(json.load(fp))
