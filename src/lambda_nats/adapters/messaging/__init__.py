"""Messaging adapter - lifecycle notice publishing via nats-py."""

from __future__ import annotations

from .publisher import NatsPublisher, connect_publisher

__all__ = ["NatsPublisher", "connect_publisher"]
