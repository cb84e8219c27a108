"""courtflow - play animation timeline engine.

Turns a sparse play diagram (player spots and drawn actions) into a dense,
time-indexed animation and drives its playback:
- Movement paths and keyframes derived from the diagram
- Fixed-rate frame sampling
- A transport state machine for play/pause/seek/loop
"""

__version__ = "0.1.0"
