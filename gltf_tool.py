#!/usr/bin/env python3
"""
glTF command line tool.

Usage:
    gltf-tool info model.glb
    gltf-tool basecolor model.glb [MATERIAL] [-o out.png] [--force]
    gltf-tool basecolor model.glb --texture-index 0
"""

import argparse
import logging
import sys
from pathlib import Path

from basecolor import EmbeddedImage, resolve_basecolor, resolve_basecolor_by_texture_index, suggested_extension
from decoded_images import decode_images
from gltf_document import load_document
from gltf_summary import render_yaml, summarize
from tool_config import load_config

logger = logging.getLogger("gltf_tool")


def build_parser():
    parser = argparse.ArgumentParser(prog="gltf-tool", description="GLTF CLI")
    parser.add_argument("--config", help="TOML config file")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="-v for info, -vv for debug")
    actions = parser.add_subparsers(dest="action", required=True)

    info = actions.add_parser("info", help="Show info")
    info.add_argument("gltf_filename", help="GLTF/GLB filename")

    bc = actions.add_parser("basecolor", help="Extract basecolor texture from a Metallic-Roughness Material")
    bc.add_argument("gltf_filename", help="GLTF/GLB filename")
    bc.add_argument("material_name", nargs="?", help="material name (optional when there is only one)")
    bc.add_argument("-o", "--output", help="write the embedded texture here (file or directory)")
    bc.add_argument("-f", "--force", action="store_true", help="overwrite an existing output file")
    bc.add_argument("--texture-index", type=int, help="report the decoded image behind this texture instead")
    return parser


def setup_logging(verbose, config_level):
    if verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    elif config_level:
        level = getattr(logging, config_level, logging.WARNING)
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def show_info(document):
    print(render_yaml(summarize(document)), end="")


def output_path(output, material_name, mime_type, output_dir=None):
    dest = Path(output)
    if output_dir is not None and not dest.is_absolute():
        dest = Path(output_dir) / dest
    if dest.is_dir():
        # material names come from the file, keep them inside dest
        stem = Path(material_name).name if material_name else ""
        if stem in ("", ".", ".."):
            stem = "basecolor"
        dest = dest / f"{stem}.{suggested_extension(mime_type)}"
    return dest


def write_image(dest, data, overwrite=False):
    """Write bytes to dest. Without overwrite an existing file raises FileExistsError."""
    dest.parent.mkdir(parents=True, exist_ok=True)
    with open(dest, "wb" if overwrite else "xb") as f:
        f.write(data)
    logger.info("wrote %d bytes to %s", len(data), dest)


def extract_basecolor(document, args, config):
    image = resolve_basecolor(document, args.material_name)
    if isinstance(image, EmbeddedImage):
        print(f"{image.length} bytes ({image.mime_type or 'unknown mime type'})")
        if args.output:
            dest = output_path(args.output, args.material_name, image.mime_type, config["output_dir"])
            write_image(dest, image.data, overwrite=args.force or config["overwrite"])
            print(f"wrote {dest}")
    else:
        print(f"uri {image.uri}")
        if image.mime_type:
            print(f"mime type {image.mime_type}")
        if args.output:
            print("external image, nothing written", file=sys.stderr)


def extract_basecolor_by_texture(document, texture_index):
    image = resolve_basecolor_by_texture_index(document, decode_images(document), texture_index)
    print(f"image {image.index}: {image.width}x{image.height}")


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.action == "basecolor" and args.texture_index is not None and (args.material_name or args.output):
        parser.error("--texture-index cannot be combined with MATERIAL or --output")
    try:
        config = load_config(args.config)
        setup_logging(args.verbose, config["log_level"])
        document = load_document(args.gltf_filename)
        if args.action == "info":
            show_info(document)
        elif args.texture_index is not None:
            extract_basecolor_by_texture(document, args.texture_index)
        else:
            extract_basecolor(document, args, config)
    except (ValueError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
