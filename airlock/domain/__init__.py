"""
Domain layer for the airlock controller.

Pure cycle logic: device facades, cycle plans, the cycle state machine and
the Airlock entity. The domain imports nothing from the application or
infrastructure layers.
"""
