#!/usr/bin/env python

import click
import logging

from expectpy import group_report

EXPECTATIONS_PATH = 'tests/expectations.json'

logger = logging.getLogger('expectpy')


# Print each expectation group (parent path) and the number of keys under it,
# most populated groups first.
@click.command()
@click.option('--verbose', '-v', is_flag=True)
def cli(verbose):
    if verbose:
        logging.basicConfig(level=logging.INFO)

    lines = group_report(EXPECTATIONS_PATH)
    logger.info(f'{len(lines)} groups in {EXPECTATIONS_PATH}')

    for line in lines:
        click.echo(line)


if __name__ == '__main__':
    cli()
