"""magstripe — decode magnetic stripe service codes."""

__version__ = "0.1.0"
