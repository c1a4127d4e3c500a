"""HTTP and command-line front ends for the ShakeSearch engine."""
