#!/usr/bin/env python3
"""
prettylog console example

Run with LOG_FILTER="example.db=debug" to hide the database chatter.
"""

import logging
import time

import prettylog
from prettylog import PrettyFormatter, SeverityLevel, TargetFilter, TimestampStyle


def main():
    formatter = (
        PrettyFormatter.builder()
        .unix_timestamp(TimestampStyle.fractional(3))
        .with_continuation()
        .build()
    )
    prettylog.try_init_with_filters(formatter, SeverityLevel.TRACE, TargetFilter.from_env())

    app = logging.getLogger("example")
    db = logging.getLogger("example.db")

    app.info("starting up")
    db.debug("opening connection pool")
    db.log(prettylog.TRACE_LEVEL, "SELECT 1")
    time.sleep(0.01)
    app.warning("cache is cold")
    try:
        1 / 0
    except ZeroDivisionError:
        app.exception("request failed")


if __name__ == "__main__":
    main()
