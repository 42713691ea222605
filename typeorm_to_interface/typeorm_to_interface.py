import json

import click

from .log_config import configure_logging
from .pipeline import GenerationError, GeneratorConfig, OutputLayout, PipelineGenerator


@click.command()
@click.option("--input", "-i", "input_path", required=True, type=str, help="Directory, file or glob of TypeORM entity sources")
@click.option(
    "--output",
    "-o",
    "output_path",
    required=True,
    type=click.Path(resolve_path=True),
    help="Output directory, or a .ts file to write a single aggregate file",
)
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option("--layout", "-l", default=None, type=click.Choice([layout.value for layout in OutputLayout]))
@click.option("--prefix/--no-prefix", default=None, help="Prefix interface names with 'I' (default: on)")
@click.option("--verbose/--quiet", default=None, help="Log one line per generated class (default: on)")
def typeorm_to_interface(input_path, output_path, config, layout, prefix, verbose):
    if config is not None:
        with open(config) as f:
            config = json.load(f)
            config = GeneratorConfig.from_dict(config)
    else:
        config = GeneratorConfig()

    # CLI flags override the config file
    if layout is not None:
        config.output.layout = OutputLayout(layout)
    if prefix is not None:
        config.use_prefix = prefix
    if verbose is not None:
        config.verbose = verbose

    configure_logging(config.verbose)

    codegen = PipelineGenerator(config)
    try:
        codegen.run(input_path, output_path)
    except GenerationError as e:
        raise click.ClickException(str(e)) from e
