"""Unit tests.

Rule evaluators are called directly with literal inputs; services get
in-memory fakes for their collaborators. Nothing here touches the network,
the real clock or the user's log directory.
"""
