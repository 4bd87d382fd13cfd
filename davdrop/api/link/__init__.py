"""Link rendering API module."""
