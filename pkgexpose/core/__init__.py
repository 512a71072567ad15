"""Service layer behind the pkgexpose command line interface."""
