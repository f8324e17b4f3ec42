"""Circular linked list holding the partial trees of the MST algorithm."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional

from .exceptions import EmptyCollectionError, NoMatchingTreeError
from .structures.graph import Vertex
from .structures.partial_tree import PartialTree


@dataclass(eq=False, repr=False)
class Node:
    """环形链表节点。

    属性:
        tree: 节点保存的部分树
        next: 环中的下一个节点
    """
    tree: PartialTree
    next: Optional[Node] = None


class PartialTreeList:
    """用单向环形链表保存部分树的容器。

    只保存指向最后一个节点的 ``rear`` 引用，``rear.next`` 即队首，
    因此尾部追加和队首删除都是 O(1)。

    不变量:
        - ``rear is None`` 当且仅当 ``size == 0``
        - ``rear.next`` 总是队首（最早加入且仍在表中的节点）
        - 从队首沿 ``next`` 前进 ``size`` 次恰好回到队首

    主要操作:
        - append: 追加到队尾，O(1)
        - remove: 删除队首，O(1)
        - remove_tree_containing: 删除包含指定顶点的部分树，O(n)

    容器不是线程安全的，迭代期间不允许修改结构。
    """

    def __init__(self) -> None:
        """初始化空表。"""
        self.rear: Optional[Node] = None
        self._size = 0

    def append(self, tree: PartialTree) -> None:
        """把部分树追加到表尾。

        参数:
            tree: 要追加的部分树
        """
        node = Node(tree)
        if self.rear is None:
            node.next = node
        else:
            node.next = self.rear.next
            self.rear.next = node
        self.rear = node
        self._size += 1

    def remove(self) -> PartialTree:
        """删除并返回队首的部分树。

        返回:
            PartialTree: 被删除的部分树

        异常:
            EmptyCollectionError: 表为空
        """
        if self.rear is None:
            raise EmptyCollectionError("list is empty")
        front = self.rear.next
        if front is self.rear:
            self.rear = None
        else:
            self.rear.next = front.next
        front.next = None
        self._size -= 1
        return front.tree

    def remove_tree_containing(self, vertex: Vertex) -> PartialTree:
        """删除并返回包含 ``vertex`` 的部分树。

        从队首开始最多扫描一整圈，比较每棵树的根与 ``vertex`` 当前的根
        （比较的是分量身份，而不是顶点本身）。

        参数:
            vertex: 目标顶点

        返回:
            PartialTree: 被删除的部分树

        异常:
            NoMatchingTreeError: 没有任何部分树的根与顶点的根相同

        时间复杂度: O(n)
        """
        if self.rear is None:
            raise NoMatchingTreeError(f"no tree contains vertex {vertex}")
        target = vertex.root
        prev = self.rear
        ptr = self.rear.next
        while True:
            if ptr.tree.root is target:
                if ptr is prev:
                    # 唯一的节点
                    self.rear = None
                else:
                    prev.next = ptr.next
                    if ptr is self.rear:
                        self.rear = prev
                ptr.next = None
                self._size -= 1
                return ptr.tree
            prev = ptr
            ptr = ptr.next
            if ptr is self.rear.next:
                break
        raise NoMatchingTreeError(f"no tree contains vertex {vertex}")

    def size(self) -> int:
        """返回表中部分树的数量。"""
        return self._size

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[PartialTree]:
        return PartialTreeListIterator(self)

    def __repr__(self) -> str:
        return f"PartialTreeList({[str(tree.root) for tree in self]})"


class PartialTreeListIterator:
    """从队首开始依次产出 ``size`` 棵部分树的一次性迭代器。"""

    def __init__(self, target: PartialTreeList) -> None:
        self._rest = len(target)
        self._ptr = target.rear.next if self._rest > 0 else None

    def __iter__(self) -> PartialTreeListIterator:
        return self

    def __next__(self) -> PartialTree:
        if self._rest <= 0:
            raise StopIteration
        tree = self._ptr.tree
        self._ptr = self._ptr.next
        self._rest -= 1
        return tree
