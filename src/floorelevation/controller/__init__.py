"""
The CONTROLLER layer runs the commands against a host.
It talks to the host only through the protocols in `controller.host`.
"""
