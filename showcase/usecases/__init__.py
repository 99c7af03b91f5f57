"""Use-case layer between view state and the REST adapters.

Modules here talk to ports, never to ``requests`` directly, and translate
adapter failures into ``FetchError`` values.
"""
