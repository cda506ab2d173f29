"""create-noiriko -- interactive scaffolder for Turborepo + Next.js monorepos."""

__version__ = "0.1.0"
