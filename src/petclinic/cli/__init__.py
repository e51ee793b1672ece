"""petclinic command line interface."""

from petclinic.cli.app import app

__all__ = ["app"]
