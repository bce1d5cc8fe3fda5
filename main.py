import json
import logging
import os

import click

from notebook_layouts.config import PROFILES, get_profile
from notebook_layouts.errors import LayoutEngineError
from notebook_layouts.models import (
    LineSpacing,
    OverlayAlgorithm,
    OverlaySpec,
    PaperLineType,
    Placement,
    Query,
    RasterImage,
)
from notebook_layouts.patterns import PatternCatalog, PatternCategory
from notebook_layouts.renderer import render, render_all
from notebook_layouts.retrieval import retrieve

EXTENSION_MEDIA = {
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".gif": "image/gif",
    ".webp": "image/webp",
}


def _media_type(path: str) -> str:
    ext = os.path.splitext(path)[1].lower()
    if ext not in EXTENSION_MEDIA:
        raise click.BadParameter(f"Unsupported file extension '{ext}'. Use one of: {', '.join(EXTENSION_MEDIA)}")
    return EXTENSION_MEDIA[ext]


def _load_catalog(catalog_path: str | None) -> PatternCatalog:
    if catalog_path:
        return PatternCatalog.load_json(catalog_path)
    return PatternCatalog.from_starter_patterns()


def _write(path: str, data: bytes):
    out_dir = os.path.dirname(path)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    with open(path, "wb") as f:
        f.write(data)


@click.group(help="Retrieve notebook page layouts and draw paper guide overlays onto images.")
@click.option("--catalog", "catalog_path", type=click.Path(exists=True, dir_okay=False), default=None, help="JSON pattern catalog (defaults to the starter patterns)")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Debug logging")
@click.pass_context
def cli(ctx: click.Context, catalog_path: str | None, verbose: bool):
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, format="%(levelname)s %(name)s: %(message)s")
    ctx.ensure_object(dict)
    ctx.obj["catalog_path"] = catalog_path


@cli.command("suggest-layouts", help="Rank catalog patterns against PROMPT and print the best layouts.")
@click.argument("prompt")
@click.option("--category", type=click.Choice([c.value for c in PatternCategory], case_sensitive=False), default=None, help="Preferred category (adds a score bonus)")
@click.option("--profile", "profile_name", type=click.Choice(list(PROFILES)), default="default", show_default=True, help="Retrieval profile")
@click.option("--no-editable", "no_editable", is_flag=True, default=False, help="Omit editable elements from the output")
@click.option("--json", "as_json", is_flag=True, default=False, help="Print the full result as JSON")
@click.pass_context
def suggest_layouts(ctx: click.Context, prompt: str, category: str | None, profile_name: str, no_editable: bool, as_json: bool):
    catalog = _load_catalog(ctx.obj.get("catalog_path"))
    query = Query(text=prompt, category=category.lower() if category else None, editable_requested=not no_editable)
    try:
        result = retrieve(query, catalog, get_profile(profile_name))
    except LayoutEngineError as e:
        raise click.UsageError(str(e))

    if as_json:
        click.echo(json.dumps(result.model_dump(mode="json"), indent=2))
        return

    if not result.layouts:
        click.echo("No matching layouts.")
    for i, layout in enumerate(result.layouts, 1):
        click.echo(f"{i}. {layout.name} [{layout.category}] confidence {layout.confidence:.2f}")
        click.echo(f"   {layout.description}")
        if layout.editable_elements:
            click.echo(f"   {len(layout.editable_elements)} editable elements")
    for s in result.suggestions:
        click.echo(f"💡 {s}")


@cli.command(help="Draw a guide overlay onto INPUT and write the result to OUTPUT.")
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False))
@click.argument("output_path", type=click.Path(dir_okay=False))
@click.option("--algorithm", type=click.Choice([a.value for a in OverlayAlgorithm]), default=OverlayAlgorithm.RULED.value, show_default=True, help="Guide algorithm")
@click.option("--spacing", type=click.Choice([s.value for s in LineSpacing]), default=LineSpacing.NORMAL.value, show_default=True, help="Line spacing (ruled, grid)")
@click.option("--margin-line", "margin_line", is_flag=True, default=False, help="Red margin line (ruled only)")
@click.option("--line-color", "line_color", type=str, default="#CCCCCC", show_default=True, help="Guide line color")
@click.option("--opacity", type=click.FloatRange(0.0, 1.0), default=0.3, show_default=True, help="Guide line opacity")
@click.option("--paper-line-type", "paper_line_type", type=click.Choice([p.value for p in PaperLineType]), default=PaperLineType.RULED.value, show_default=True, help="Paper style (ruled adds interior rules to smart margins)")
@click.option("--offset-x", "offset_x", type=float, default=0.0, show_default=True, help="Source image x offset in pixels")
@click.option("--offset-y", "offset_y", type=float, default=0.0, show_default=True, help="Source image y offset in pixels")
@click.option("--scale", type=click.FloatRange(min=0.0, min_open=True), default=1.0, show_default=True, help="Source image scale")
@click.option("--rotation", type=float, default=0.0, show_default=True, help="Source image rotation in degrees, clockwise")
@click.option("--all", "render_every", is_flag=True, default=False, help="Render every algorithm; OUTPUT gets an -<algorithm> suffix")
def overlay(input_path: str, output_path: str, algorithm: str, spacing: str, margin_line: bool, line_color: str, opacity: float,
            paper_line_type: str, offset_x: float, offset_y: float, scale: float, rotation: float, render_every: bool):
    try:
        spec = OverlaySpec(
            algorithm=algorithm,
            line_spacing=spacing,
            margin_line=margin_line,
            line_color=line_color,
            overlay_opacity=opacity,
            paper_line_type=paper_line_type,
            placement=Placement(offset_x=offset_x, offset_y=offset_y, scale=scale, rotation_degrees=rotation),
        )
    except ValueError as e:
        raise click.BadParameter(str(e))

    with open(input_path, "rb") as f:
        source = RasterImage(data=f.read(), mime_type=_media_type(input_path))

    try:
        if render_every:
            stem, ext = os.path.splitext(output_path)
            for algo, image in render_all(source, spec).items():
                path = f"{stem}-{algo.value}{ext}"
                _write(path, image.data)
                click.echo(f"✅ Wrote {algo.value} overlay to {path}")
            return
        image = render(source, spec)
    except LayoutEngineError as e:
        raise click.ClickException(str(e))

    _write(output_path, image.data)
    click.echo(f"✅ Wrote {algorithm} overlay to {output_path}")


@cli.command("catalog-stats", help="Print pattern catalog statistics.")
@click.pass_context
def catalog_stats(ctx: click.Context):
    stats = _load_catalog(ctx.obj.get("catalog_path")).get_stats()
    click.echo(f"Patterns: {stats['total_patterns']}")
    click.echo(f"Editable elements: {stats['total_editable_elements']}")
    click.echo(f"Distinct tags: {stats['distinct_tags']}")
    click.echo(f"Average popularity: {stats['average_popularity']:.1f}")
    for category, count in sorted(stats["categories"].items()):
        click.echo(f"  {category}: {count}")


@cli.command("export-catalog", help="Write the pattern catalog to PATH as JSON.")
@click.argument("path", type=click.Path(dir_okay=False))
@click.pass_context
def export_catalog(ctx: click.Context, path: str):
    catalog = _load_catalog(ctx.obj.get("catalog_path"))
    out_dir = os.path.dirname(path)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    catalog.export_json(path)
    click.echo(f"✅ Exported {len(catalog)} patterns to {path}")


if __name__ == "__main__":
    cli()
