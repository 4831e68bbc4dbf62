import yaml

from gltf_document import Document, Image, Material, Mesh, Texture, UriSource, load_document_from_bytes
from gltf_summary import EntitySummary, render_yaml, summarize


def test_unnamed_entities_are_skipped():
    doc = Document(
        materials=[Material(0, "A", None, None), Material(1, None, None, None), Material(2, "C", None, None)],
        textures=[Texture(0, None, None)],
        images=[Image(0, "img", UriSource("a.png", None)), Image(1, None, UriSource("b.png", None))],
        meshes=[Mesh(0, "Body"), Mesh(1, "Head")],
    )
    summary = summarize(doc)
    assert summary == EntitySummary(
        material_names=["A", "C"],
        images_names=["img"],
        meshes_names=["Body", "Head"],
        texture_names=[],
    )
    assert len(summary.material_names) < len(doc.materials)
    assert "" not in summary.material_names


def test_empty_document():
    assert summarize(Document()) == EntitySummary([], [], [], [])


def test_render_yaml_key_order():
    summary = EntitySummary(["Red"], ["albedo"], ["Cube"], [])
    text = render_yaml(summary)
    keys = [line.split(":")[0] for line in text.splitlines() if not line.startswith(("-", " "))]
    assert keys == ["material_names", "images_names", "meshes_names", "texture_names"]
    assert yaml.safe_load(text) == {
        "material_names": ["Red"],
        "images_names": ["albedo"],
        "meshes_names": ["Cube"],
        "texture_names": [],
    }


def test_summarize_loaded_glb(sample_glb):
    summary = summarize(load_document_from_bytes(sample_glb))
    assert summary.material_names == ["Painted", "Wood", "Plain"]
    assert summary.images_names == ["albedo", "wood"]
    assert summary.meshes_names == ["Body"]
    assert summary.texture_names == ["albedo_tex", "wood_tex"]
