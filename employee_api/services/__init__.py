"""Services — orchestration between the upstream source and the pure core."""
