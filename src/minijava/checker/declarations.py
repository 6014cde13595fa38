"""Declaration checking: classes, fields, methods, params, and variables."""

import logging

from ..ast_nodes import ClassDecl, MethodDecl, ObjType, Param, Return, VarDecl
from .core import ErrorKind
from .returns import Evidence, returns_on_all_paths

logger = logging.getLogger(__name__)


class DeclarationsMixin:

    def _check_class(self, decl: ClassDecl):
        self._enter_class(self.class_table[decl.name])
        logger.debug("checking class %s", decl.name)
        for fld in decl.fields:
            self.type_env[fld.name] = fld.type
            self._check_var_decl(fld)
        for method in decl.methods:
            self._check_method(method)

    def _check_method(self, method: MethodDecl):
        self._enter_method(method)
        logger.debug("checking method %s.%s", self.current_class.name, method.name)
        for param in method.params:
            self.type_env[param.name] = param.type
            self._check_param(param)
        for var in method.locals:
            self.type_env[var.name] = var.type
            self._check_var_decl(var)
        for stmt in method.statements:
            self._check_stmt(stmt)
            if isinstance(stmt, Return):
                self.return_evidence.append(Evidence.ret())
        if method.return_type is None:
            return
        verdict = returns_on_all_paths(self.return_evidence)
        logger.debug("return flow of %s.%s: %s", self.current_class.name,
                     method.name, "ok" if verdict else "missing")
        if not verdict:
            self._error(ErrorKind.MISSING_RETURN, "MethodDecl",
                        f"Missing return statement in method "
                        f"{self.current_class.name}.{method.name}", method)

    def _require_class(self, t, context: str, node):
        if isinstance(t, ObjType) and t.name not in self.class_table:
            self._error(ErrorKind.UNKNOWN_CLASS, context, f"Can't find class {t.name}", node)

    def _check_param(self, param: Param):
        self._require_class(param.type, "Param", param)
        if isinstance(param.type, ObjType):
            self.object_class_env[param.name] = param.type.name

    def _check_var_decl(self, var: VarDecl):
        self._require_class(var.type, "VarDecl", var)
        if isinstance(var.type, ObjType):
            self.object_class_env[var.name] = var.type.name
        if var.init is None:
            return
        init = self._check_expr(var.init)
        self._require_class(init, "VarDecl", var)
        if not self._assignable(var.type, init):
            self._error(ErrorKind.TYPE_MISMATCH, "VarDecl",
                        f"Cannot initialize {var.name} of type {self._format_type(var.type)} "
                        f"with {self._format_type(init)}", var)
