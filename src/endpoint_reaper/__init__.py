"""Delete an Azure ML online endpoint if it exists."""
