"""Translate core errors into click errors."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

import click

from storefront.domain.exceptions import DomainException, InfrastructureError


@contextmanager
def reported_errors() -> Iterator[None]:
    """Re-raise domain and storage errors as ``click.ClickException``."""
    try:
        yield
    except (DomainException, InfrastructureError) as exc:
        raise click.ClickException(f"[{exc.code}] {exc}") from exc
