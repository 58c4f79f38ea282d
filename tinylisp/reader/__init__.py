from tinylisp.reader.parser import lex, read, read_all, TokenStream, offset_to_line_col

__all__ = ["lex", "read", "read_all", "TokenStream", "offset_to_line_col"]
