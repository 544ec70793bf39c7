"""
Argument prompt engine tests (strategies → tokens).

Scope
- Validate required/optional/repeated strategies and the tokens they emit.
- Validate token spelling for long, short, fixed-arity and switch options.
- Validate delimiter collapsing and per-entry tokens without a delimiter.
- Validate help composition with and without verbose diagnostics.
- Validate that prompt failures abort immediately.

Conventions
- Test method names follow CamelCase per project convention.
- Prompts are answered by a real Prompter reading a scripted stream.
"""
from __future__ import annotations

import unittest
from unittest import TestCase

import click

from helmsman import MalformedEntryError, PromptInterruptedError, describe
from helmsman.arguments import ArgumentEngine
from schemas import git, scripted


def arguments(command):
    return {argument.name: argument for argument in describe(command).arguments}


class TestStrategies(TestCase):
    """Behavioral tests for the three strategies."""

    def setUp(self):
        self.git = describe(git)
        self.my_arg = self.git.arguments[0]
        self.message = self.git.children["commit"].arguments[0]
        self.clone = self.git.children["clone"].arguments[0]
        self.address, self.squash = self.git.children["merge"].arguments

    def testOptionalDeclinedYieldsNothing(self):
        engine = ArgumentEngine(scripted("n"))
        self.assertEqual(engine.prompt(self.my_arg), [])

    def testOptionalAcceptedUsesInlineFlag(self):
        engine = ArgumentEngine(scripted("y", "a,b"))
        self.assertEqual(engine.prompt(self.my_arg), ["--my_arg=a,b"])

    def testOptionalPositional(self):
        engine = ArgumentEngine(scripted("y", "hello"))
        self.assertEqual(engine.prompt(self.message), ["hello"])

    def testRepeatedWithoutDelimiterKeepsEntries(self):
        engine = ArgumentEngine(scripted("y", "a", "y", "b", "n"))
        self.assertEqual(engine.prompt(self.clone), ["a", "b"])

    def testRepeatedDeclinedImmediately(self):
        engine = ArgumentEngine(scripted("n"))
        self.assertEqual(engine.prompt(self.clone), [])

    def testRequiredRepeatedWithDelimiterCollapses(self):
        engine = ArgumentEngine(scripted("x", "y", "y", "n"))
        self.assertEqual(engine.prompt(self.address), ["x,y"])

    def testRequiredRepeatedNeverEmpty(self):
        engine = ArgumentEngine(scripted("x", "n"))
        self.assertEqual(engine.prompt(self.address), ["x"])

    def testSwitchEmitsFlagOnly(self):
        engine = ArgumentEngine(scripted("y"))
        self.assertEqual(engine.prompt(self.squash), ["--squash"])

    def testInterruptedPromptRaises(self):
        engine = ArgumentEngine(scripted("y"))
        with self.assertRaises(PromptInterruptedError) as context:
            engine.prompt(self.my_arg)
        self.assertEqual(context.exception.label, "my_arg")
        self.assertIsInstance(context.exception.__cause__, EOFError)


class TestTokenSpelling(TestCase):
    """Token forms follow click's own command-line conventions."""

    def setUp(self):
        @click.command()
        @click.option("-n", type=int, required=True)
        @click.option("--point", nargs=2, type=int, required=True)
        @click.option("-v", "--verbose", count=True)
        @click.option("--color/--no-color", default=True)
        @click.option("--mode", type=click.Choice(["fast", "safe"]), required=True)
        @click.argument("pair", nargs=2)
        def tool(n, point, verbose, color, mode, pair):
            pass

        self.arguments = arguments(tool)

    def testShortOptionTakesSeparateValue(self):
        engine = ArgumentEngine(scripted("3"))
        self.assertEqual(engine.prompt(self.arguments["n"]), ["-n", "3"])

    def testFixedArityOptionSplitsEntry(self):
        engine = ArgumentEngine(scripted("1 2"))
        self.assertEqual(engine.prompt(self.arguments["point"]), ["--point", "1", "2"])

    def testFixedArityPositionalSplitsEntry(self):
        engine = ArgumentEngine(scripted("'left side' right"))
        self.assertEqual(engine.prompt(self.arguments["pair"]), ["left side", "right"])

    def testCounterRepeatsFlag(self):
        engine = ArgumentEngine(scripted("y", "y", "n"))
        self.assertEqual(engine.prompt(self.arguments["verbose"]), ["--verbose", "--verbose"])

    def testNegativeSwitch(self):
        engine = ArgumentEngine(scripted("y"))
        self.assertEqual(engine.prompt(self.arguments["color"]), ["--no-color"])

    def testUnbalancedQuoteRaises(self):
        engine = ArgumentEngine(scripted("it's fine"))
        with self.assertRaises(MalformedEntryError) as context:
            engine.prompt(self.arguments["pair"])
        self.assertEqual(context.exception.name, "pair")
        self.assertEqual(context.exception.entry, "it's fine")
        self.assertIsInstance(context.exception.__cause__, ValueError)

    def testQuotedApostropheSplits(self):
        engine = ArgumentEngine(scripted("\"it's\" fine"))
        self.assertEqual(engine.prompt(self.arguments["pair"]), ["it's", "fine"])

    def testSurroundingWhitespaceIsKept(self):
        engine = ArgumentEngine(scripted("y", "  padded "))
        self.assertEqual(engine.prompt(arguments(git)["my_arg"]), ["--my_arg=  padded "])

    def testChoicesAreEnforcedByPrompt(self):
        # "slow" is rejected by the prompt itself, the next answer is taken.
        engine = ArgumentEngine(scripted("slow", "safe"))
        self.assertEqual(engine.prompt(self.arguments["mode"]), ["--mode=safe"])


class TestHelp(TestCase):
    """Help text shown next to value prompts."""

    def setUp(self):
        self.my_arg = describe(git).arguments[0]
        self.message = describe(git).children["commit"].arguments[0]

    def testPlainHelp(self):
        engine = ArgumentEngine(scripted())
        self.assertEqual(engine.help(self.my_arg), "MyArg help string")
        self.assertIsNone(engine.help(self.message))

    def testVerboseHelp(self):
        engine = ArgumentEngine(scripted(), verbose=True)
        self.assertEqual(engine.help(self.my_arg), "<text>: MyArg help string")
        self.assertEqual(engine.help(self.message), "<text>")


if __name__ == "__main__":
    unittest.main()
