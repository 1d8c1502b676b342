"""Static resource, prompt and tool descriptors paired with their handlers."""
