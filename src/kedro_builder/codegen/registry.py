# src/kedro_builder/codegen/registry.py
"""
Geradores do registro de pipelines e das settings do projeto Kedro.

O projeto exportado possui exatamente um pipeline, registrado também como
`__default__`.
"""

from __future__ import annotations

from kedro_builder.core.model.entities import ProjectMetadata
from kedro_builder.core.model.types import DataLayer


def generate_pipeline_registry(project: ProjectMetadata) -> str:
    pkg = project.python_package
    pipe = project.pipeline_name
    return f'''"""Project pipelines registry.

This module registers all pipelines in the project. Each pipeline should be
imported and added to the dictionary returned by register_pipelines().
"""

from typing import Dict

from kedro.pipeline import Pipeline

from {pkg}.pipelines import {pipe}


def register_pipelines() -> Dict[str, Pipeline]:
    """Register the project's pipelines.

    Returns:
        A mapping from pipeline names to ``Pipeline`` objects.
    """
    {pipe}_pipeline = {pipe}.create_pipeline()

    return {{
        "__default__": {pipe}_pipeline,
        "{pipe}": {pipe}_pipeline,
    }}
'''


def generate_settings() -> str:
    mapping = "\n".join(
        f'    "{layer.label}": ["{layer.value}"],' for layer in DataLayer
    )
    return f'''"""Project settings.

This file configures Kedro's behavior for this project. You can override
default Kedro settings here.
"""

from kedro.config import OmegaConfigLoader

# Instantiate and list your project hooks here
HOOKS = ()

# List the installed plugins for which to disable auto-registry
DISABLE_HOOKS_FOR_PLUGINS = ()

# Data layer directories, by layer name
DATA_LAYER_MAPPING = {{
{mapping}
}}

CONFIG_LOADER_CLASS = OmegaConfigLoader
CONFIG_LOADER_ARGS = {{
    "base_env": "base",
    "default_run_env": "local",
}}
'''


def generate_pipeline_init(pipeline_name: str) -> str:
    return f'''"""
{pipeline_name} pipeline.
"""

from .pipeline import create_pipeline

__all__ = ["create_pipeline"]
'''
