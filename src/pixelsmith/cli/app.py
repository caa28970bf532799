"""PixelSmith CLI application.

Commands:
    apply     - Apply a chain of transforms to an image
    info      - Show image dimensions and channel statistics
    overlays  - Write the default halo/grain overlay images
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table
from rich.progress import Progress, SpinnerColumn, TextColumn, BarColumn, TimeElapsedColumn

from pixelsmith import __version__
from pixelsmith.config import DEFAULT_GRAIN_SEED, DEFAULT_OVERLAY_SIZE
from pixelsmith.core.types import (
    MedianMode,
    PipelineConfig,
    TransformName,
    TransformParams,
)
from pixelsmith.errors import PixelSmithError

app = typer.Typer(
    name="pixelsmith",
    help="Pixel-level image transforms.",
    no_args_is_help=True,
)
console = Console()

# Set up logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%H:%M:%S",
)


def version_callback(value: bool):
    if value:
        console.print(f"PixelSmith v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: bool = typer.Option(
        False, "--version", "-V", help="Show version and exit.",
        callback=version_callback, is_eager=True,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
):
    if verbose:
        logging.getLogger("pixelsmith").setLevel(logging.DEBUG)


_STAGE_WEIGHTS = {
    "load": 20,
    "transform": 60,
    "save": 20,
}


def _stage_percent(stage: str, fraction: float) -> float:
    """Map a (stage, fraction) progress event to an overall percentage."""
    stages = list(_STAGE_WEIGHTS)
    if stage not in _STAGE_WEIGHTS:
        return 0.0
    base = sum(_STAGE_WEIGHTS[s] for s in stages[:stages.index(stage)])
    return base + _STAGE_WEIGHTS[stage] * fraction


@app.command()
def apply(
    image: Path = typer.Argument(..., help="Input image path."),
    output: Path = typer.Option(..., "-o", "--output", help="Output image path (format from suffix)."),
    transform: List[str] = typer.Option(
        ..., "-t", "--transform",
        help=f"Transform to apply, repeatable ({', '.join(t.value for t in TransformName)}).",
    ),
    hue: Optional[float] = typer.Option(None, "--hue", help="Hue in degrees for 'hue'."),
    saturation: Optional[float] = typer.Option(
        None, "--saturation", help="Saturation (0-1) for 'saturation'.",
    ),
    lightness: Optional[float] = typer.Option(
        None, "--lightness", help="Lightness (0-1) for 'lightness'.",
    ),
    median_mode: str = typer.Option(
        "conventional", "--median-mode",
        help="Median for 'bw' on even pixel counts: conventional or legacy.",
    ),
    halo: Optional[Path] = typer.Option(None, "--halo", help="Halo overlay image for 'instagram'."),
    grain: Optional[Path] = typer.Option(None, "--grain", help="Grain overlay image for 'instagram'."),
):
    """Apply one or more transforms, in order, to an image."""
    try:
        mode = MedianMode(median_mode.strip().lower())
    except ValueError:
        raise typer.BadParameter("Median mode must be one of: conventional, legacy.")

    config = PipelineConfig(
        input_path=image,
        output_path=output,
        transforms=list(transform),
        params=TransformParams(
            hue=hue,
            saturation=saturation,
            lightness=lightness,
            median_mode=mode,
        ),
        halo_path=halo,
        grain_path=grain,
    )

    from pixelsmith.pipeline.runner import run_pipeline

    console.print(f"\n[bold]PixelSmith[/bold]")
    console.print(f"  Input:      {image}")
    console.print(f"  Output:     {output}")
    console.print(f"  Transforms: {' -> '.join(transform)}")
    console.print()

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TimeElapsedColumn(),
        console=console,
    ) as progress:
        task = progress.add_task("Processing...", total=100)

        def on_progress(stage: str, fraction: float, message: str):
            progress.update(task, completed=_stage_percent(stage, fraction),
                            description=f"{stage}: {message}" if message else stage)

        try:
            result = run_pipeline(config, progress_callback=on_progress)
            progress.update(task, completed=100, description="Complete")
        except PixelSmithError as e:
            console.print(f"\n[red]Error:[/red] {e}")
            raise typer.Exit(code=1)

    console.print(f"\n[green]Output:[/green] {result.output_path} ({result.width}x{result.height})")
    total_time = result.diagnostics.get("total_time", 0)
    console.print(f"[dim]Total time: {total_time:.2f}s[/dim]\n")


@app.command()
def info(
    image: Path = typer.Argument(..., help="Image path."),
):
    """Show image dimensions and mean channel values."""
    from pixelsmith.io.image import load_raster

    try:
        raster = load_raster(image)
    except PixelSmithError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(code=1)

    data = raster.array
    table = Table(title=str(image), show_header=True, header_style="bold")
    table.add_column("Property", style="cyan")
    table.add_column("Value", justify="right")

    table.add_row("Width", str(raster.width))
    table.add_row("Height", str(raster.height))
    table.add_row("Pixels", f"{raster.width * raster.height:,}")
    for i, channel in enumerate(("Red", "Green", "Blue")):
        table.add_row(f"Mean {channel}", f"{float(data[..., i].mean()):.1f}")

    console.print(table)


@app.command()
def overlays(
    directory: Path = typer.Option(Path("."), "-d", "--dir", help="Output directory."),
    size: int = typer.Option(DEFAULT_OVERLAY_SIZE, "-s", "--size", min=1, help="Overlay side length."),
    seed: int = typer.Option(DEFAULT_GRAIN_SEED, "--seed", help="Grain noise seed."),
):
    """Write the default halo and grain overlays as PNG files."""
    from pixelsmith.io.image import save_raster
    from pixelsmith.overlays import generate_grain, generate_halo

    try:
        halo_path = save_raster(generate_halo(size), directory / "halo.png")
        grain_path = save_raster(generate_grain(size, seed), directory / "decorative_grain.png")
    except PixelSmithError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(code=1)

    console.print(f"[green]Saved:[/green] {halo_path}")
    console.print(f"[green]Saved:[/green] {grain_path}")


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
