import unittest
import pygame
from popups.core.node import Node


def click(pos):
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=pos, button=1)


class NodeTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        pygame.init()

    def test_opacity_clamped_to_byte_range(self):
        n = Node('n')
        n.opacity = 300
        self.assertEqual(n.opacity, 255)
        n.opacity = -5
        self.assertEqual(n.opacity, 0)

    def test_negative_content_size_rejected(self):
        with self.assertRaises(ValueError):
            Node('n', size=(-1, 10))

    def test_hierarchy_reparenting(self):
        a, b, c = Node('a'), Node('b'), Node('c')
        a.add_child(c)
        c.set_parent(b)
        self.assertEqual(a.children, [])
        self.assertEqual(b.children, [c])
        self.assertIs(b.find('c'), c)
        b.remove_child(c)
        self.assertIsNone(c.parent)

    def test_active_in_hierarchy(self):
        root = Node('root')
        child = root.add_child(Node('child'))
        self.assertTrue(child.active_in_hierarchy)
        root.active = False
        self.assertTrue(child.active)
        self.assertFalse(child.active_in_hierarchy)

    def test_world_rect_follows_parent_scale(self):
        root = Node('root', size=(400, 300), position=(200, 150))
        panel = root.add_child(Node('panel', size=(100, 50), position=(40, 0)))
        self.assertEqual(panel.world_rect().center, (240, 150))
        root.scale = 0.5
        r = panel.world_rect()
        self.assertEqual(r.size, (50, 25))
        self.assertEqual(r.center, (220, 150))

    def test_blocking_node_swallows_clicks_inside_only(self):
        root = Node('root', size=(100, 100), position=(50, 50))
        root.blocks_input = True
        self.assertTrue(root.handle_event(click((10, 10))))
        self.assertFalse(root.handle_event(click((150, 150))))
        self.assertFalse(root.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_a)))

    def test_inactive_node_ignores_input(self):
        root = Node('root', size=(100, 100), position=(50, 50))
        root.blocks_input = True
        root.active = False
        self.assertFalse(root.handle_event(click((50, 50))))

    def test_topmost_child_gets_event_first(self):
        seen = []
        class Probe(Node):
            def on_pointer(self, event):
                seen.append(self.name)
                return True
        root = Node('root', size=(100, 100), position=(50, 50))
        root.add_child(Probe('below', size=(100, 100)))
        root.add_child(Probe('above', size=(100, 100)))
        self.assertTrue(root.handle_event(click((50, 50))))
        self.assertEqual(seen, ['above'])

    def test_draw_respects_opacity_and_active(self):
        surface = pygame.Surface((100, 100))
        surface.fill((0, 0, 0))
        root = Node('root', size=(100, 100), position=(50, 50))
        box = root.add_child(Node('box', size=(20, 20), color=(200, 100, 50)))
        root.draw(surface)
        self.assertEqual(tuple(surface.get_at((50, 50)))[:3], (200, 100, 50))
        surface.fill((0, 0, 0))
        box.opacity = 0
        root.draw(surface)
        self.assertEqual(tuple(surface.get_at((50, 50)))[:3], (0, 0, 0))
        box.opacity = 255
        root.active = False
        root.draw(surface)
        self.assertEqual(tuple(surface.get_at((50, 50)))[:3], (0, 0, 0))

    def test_zero_scale_draws_nothing(self):
        surface = pygame.Surface((100, 100))
        surface.fill((0, 0, 0))
        box = Node('box', size=(20, 20), color=(255, 255, 255), position=(50, 50))
        box.scale = 0
        box.draw(surface)
        self.assertEqual(tuple(surface.get_at((50, 50)))[:3], (0, 0, 0))


if __name__ == '__main__':
    unittest.main()
