"""Demo Textual app built on courier components."""

from courier.demo.app import CourierDemoApp, main


__all__ = ["CourierDemoApp", "main"]
