"""Configuration, logging and store access shared by the whole app."""
