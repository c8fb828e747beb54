from .train import Train as Train
