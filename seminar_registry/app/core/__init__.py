"""Configuration, logging and the error taxonomy shared by all layers."""
