from __future__ import annotations

import logging

from publicip.models import OutputDestination
from publicip.sinks.base import OutputSink
from publicip.sources.base import IPSource

logger = logging.getLogger(__name__)


def execute(
    ip_source: IPSource,
    output_sink: OutputSink,
    destination: OutputDestination,
) -> None:
    """Fetch the public IP once and persist it once.

    Errors from either collaborator propagate unchanged; if the fetch fails
    the sink is never called.
    """
    public_ip = ip_source.fetch()
    logger.debug("Fetched public IP %s", public_ip)

    output_sink.persist(destination, public_ip.encode("utf-8"))
    logger.debug("Wrote public IP to %s", destination.path)
