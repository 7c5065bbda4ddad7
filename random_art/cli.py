"""
random_art/cli.py - Command-line interface
"""
import logging
import os
import random
import time

import click

from . import __version__
from .artwork import Artwork
from .config import DOMAINS, NORMALIZE_MODES, RenderConfig
from .renderer import Renderer

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger("random_art")


def render_options(func):
    """Options shared by the rendering commands"""
    func = click.option('--verbose', '-v', is_flag=True, help='Verbose output')(func)
    func = click.option('--normalize', type=click.Choice(NORMALIZE_MODES), default='clip',
                        help='How channel values are mapped into [0, 1]')(func)
    func = click.option('--domain', type=click.Choice(DOMAINS), default='unit',
                        help='Coordinate range: unit [0, 1) or signed [-1, 1]')(func)
    func = click.option('--size', '-s', default=256, help='Output width and height in pixels')(func)
    func = click.option('--depth', '-d', default=6, help='Maximum tree depth')(func)
    return func


def make_config(**options) -> RenderConfig:
    try:
        return RenderConfig(**options).validate()
    except ValueError as e:
        raise click.UsageError(str(e))


@click.group()
@click.version_option(version=__version__)
def cli():
    """Random Art - images from random expression trees"""
    pass


@cli.command()
@render_options
@click.option('--seed', type=int, default=None, help='Seed for the tree (random if omitted)')
@click.option('--out', '-o', default=None, help='Output filename (optional)')
def generate(depth, size, domain, normalize, verbose, seed, out):
    """Generate a single image"""
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    config = make_config(depth=depth, width=size, height=size, domain=domain,
                         normalize=normalize, seed=seed)
    art = Artwork(config.seed, config.depth) if config.seed is not None else Artwork.random(config.depth)

    if not out:
        out = f"art_{art.seed}_d{config.depth}.png"
    out_dir = os.path.dirname(out)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)

    if verbose:
        click.echo(str(art))

    start_time = time.time()
    renderer = Renderer(config.domain, config.normalize)
    renderer.render_image(art.tree, size=config.size, filename=out)

    click.echo(f"Image saved: {out}")
    if verbose:
        click.echo(f"Render time: {time.time() - start_time:.2f}s")


@cli.command()
@render_options
@click.option('--count', '-n', default=8, help='Number of images')
@click.option('--seed', type=int, default=None, help='First seed; the rest follow consecutively')
@click.option('--out', '-o', default='out/', help='Output directory')
def gallery(depth, size, domain, normalize, verbose, count, seed, out):
    """Generate a series of images with consecutive seeds"""
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
    if count < 1:
        raise click.BadParameter('must be at least 1', param_hint='--count')

    config = make_config(depth=depth, width=size, height=size, domain=domain,
                         normalize=normalize, seed=seed, out=out)
    first_seed = config.seed if config.seed is not None else random.getrandbits(32)

    os.makedirs(config.out, exist_ok=True)
    renderer = Renderer(config.domain, config.normalize)

    click.echo(f"Rendering {count} images at depth {config.depth} into {config.out}")
    start_time = time.time()

    for i in range(count):
        art = Artwork(first_seed + i, config.depth)
        filename = os.path.join(config.out, f"art_{art.seed}_d{config.depth}.png")
        renderer.render_image(art.tree, size=config.size, filename=filename)
        logger.info("%d/%d: seed %d, %d nodes", i + 1, count, art.seed, art.get_complexity())

    total_time = time.time() - start_time
    click.echo(f"Gallery completed in {total_time:.1f}s")


@cli.command()
@click.option('--seed', type=int, required=True, help='Seed for the tree')
@click.option('--depth', '-d', default=6, help='Maximum tree depth')
def describe(seed, depth):
    """Print the tree built from a seed without rendering it"""
    config = make_config(depth=depth, seed=seed)
    art = Artwork(config.seed, config.depth)
    click.echo(str(art))
    click.echo(art.formula)


if __name__ == '__main__':
    cli()
