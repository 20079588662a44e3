"""Test package for sandtime.

Core tests drive time through ``FakeClock`` so nothing waits in real time.
The gallery tests run headlessly using pygame's dummy video driver to avoid
opening real windows. To run these tests, execute ``pytest`` from the
project root.
"""
