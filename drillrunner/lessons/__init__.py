"""Worked solutions to lesson topics, one module per topic."""