"""Components doing the actual work: locating and running the compiler, parsing \
its output and mapping source files to compilables."""
