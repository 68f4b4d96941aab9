"""Terminal front end: setup prompts, turn prompts and result printing."""
