"""Launch control logic for a rocket test stand: options, input, colours, observables and the launch sequence."""

__version__ = "0.1.0"