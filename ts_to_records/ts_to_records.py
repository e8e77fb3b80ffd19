import json
import logging

import click

from .pipeline import SUPPORTED_LANGUAGES, CodegenError, CodeGeneratorConfig, DeclarationParser, PipelineGenerator
from .pipeline.generator import BACKENDS
from .utils import output_file_path


@click.command()
@click.option("--config", "-c", required=True, type=click.Path(exists=True, resolve_path=True), help="Config file path (JSON)")
@click.option(
    "--lang",
    "-l",
    "languages",
    multiple=True,
    default=tuple(SUPPORTED_LANGUAGES),
    type=click.Choice(SUPPORTED_LANGUAGES),
    help="Languages to generate (repeatable)",
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log pipeline details")
@click.argument("path", type=click.Path(exists=True, resolve_path=True))
@click.argument("output", type=click.Path(file_okay=False, resolve_path=True))
def ts_to_records(config, languages, verbose, path, output):
    """Generate Swift and Kotlin records from the declaration document at PATH into OUTPUT."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)

    with open(path) as f:
        document = json.load(f)

    with open(config) as f:
        config = CodeGeneratorConfig.from_dict(json.load(f))

    try:
        # Checked up front, even when Kotlin is not requested
        config.require_kotlin_package_name()

        declarations = DeclarationParser().parse(document)
        for language in languages:
            out = PipelineGenerator(declarations, config, language).generate()

            output_file = output_file_path(output, path, language, BACKENDS[language].FILE_EXTENSION)
            output_file.parent.mkdir(parents=True, exist_ok=True)
            with open(output_file, "w", encoding="utf-8") as f:
                f.write(out)
            click.echo(f"Generated {language} code at: {output_file}")
    except CodegenError as e:
        raise click.ClickException(str(e)) from e
