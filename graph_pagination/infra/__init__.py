"""Infrastructure plumbing shared by the core package."""
