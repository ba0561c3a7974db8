from atmfjstc.lib.variant_codegen.codegen.ast.base import CodegenNode, PromptableNode
from atmfjstc.lib.variant_codegen.codegen.ast.raw import Atom
from atmfjstc.lib.variant_codegen.codegen.ast.structural import Sequence, Section, NullNode, ItemsList, seq0, seq1
from atmfjstc.lib.variant_codegen.codegen.ast.block import Block, statement
from atmfjstc.lib.variant_codegen.codegen.ast.text import Docstring
