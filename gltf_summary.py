from typing import List, NamedTuple

import yaml


class EntitySummary(NamedTuple):
    material_names: List[str]
    images_names: List[str]
    meshes_names: List[str]
    texture_names: List[str]


def named(entities):
    # unnamed entities are skipped, not rendered as empty strings
    return [e.name for e in entities if e.name is not None]


def summarize(document) -> EntitySummary:
    """Collect the display names of materials, images, meshes and textures."""
    return EntitySummary(
        material_names=named(document.materials),
        images_names=named(document.images),
        meshes_names=named(document.meshes),
        texture_names=named(document.textures),
    )


def summary_to_dict(summary):
    return {key: list(value) for key, value in summary._asdict().items()}


def render_yaml(summary):
    return yaml.safe_dump(summary_to_dict(summary), sort_keys=False, allow_unicode=True)
