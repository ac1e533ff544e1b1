"""HTTP layer: handlers and routers."""
