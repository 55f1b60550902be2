"""hexevents kernel: records, normalization, attachment and the emitter port."""
