"""Real-time event delivery."""

from slackbots.infrastructure.events.dispatcher import EventDispatcher
from slackbots.infrastructure.events.loop import EventLoop
from slackbots.infrastructure.events.queue import EventQueue

__all__ = ["EventDispatcher", "EventLoop", "EventQueue"]
