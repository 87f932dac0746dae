"""Worked solutions to the course's exercises."""