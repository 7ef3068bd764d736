"""Domain layer -- parameters, event data and the MPEvent value object.

Everything here is immutable from the caller's point of view: parameters
are frozen models and every ``MPEvent`` update returns a new instance.
"""
