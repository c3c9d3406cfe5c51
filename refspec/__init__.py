"""Parse refspecs and determine what they instruct a fetch or push to do."""
from refspec.errors import ClassifyError
from refspec.errors import IllegalColonPlacement
from refspec.errors import IncompatibleNegative
from refspec.errors import InvalidRefName
from refspec.errors import MalformedSigil
from refspec.errors import ParseError
from refspec.errors import RefSpecError
from refspec.errors import Unclassifiable
from refspec.errors import WildcardMismatch
from refspec.instruction import AndUpdate
from refspec.instruction import classify
from refspec.instruction import Delete
from refspec.instruction import Exclude
from refspec.instruction import FetchDefault
from refspec.instruction import FetchInstruction
from refspec.instruction import Instruction
from refspec.instruction import Matching
from refspec.instruction import Only
from refspec.instruction import PushInstruction
from refspec.instruction import Update
from refspec.parse import parse
from refspec.refname import is_valid_name
from refspec.spec import RefSpec
from refspec.spec import RefSpecRef
from refspec.types import Mode
from refspec.types import Operation

__all__ = [
    "AndUpdate",
    "classify",
    "ClassifyError",
    "Delete",
    "Exclude",
    "FetchDefault",
    "FetchInstruction",
    "IllegalColonPlacement",
    "IncompatibleNegative",
    "Instruction",
    "InvalidRefName",
    "is_valid_name",
    "MalformedSigil",
    "Matching",
    "Mode",
    "Only",
    "Operation",
    "parse",
    "ParseError",
    "PushInstruction",
    "RefSpec",
    "RefSpecError",
    "RefSpecRef",
    "Unclassifiable",
    "Update",
    "WildcardMismatch",
]
